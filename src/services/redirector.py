"""src.services.redirector.py
분류된 에러 비디오로 307 리다이렉트를 전송합니다.
원본 에러 본문과 헤더는 클라이언트에게 전달되지 않습니다.
"""
import logging

from starlette.responses import RedirectResponse
from starlette.types import Receive, Scope, Send

from src.models import VideoMatch

logger = logging.getLogger(__name__)


def build_video_url(video_path: str, video: str) -> str:
    """{video_path}/{video} 형태의 리다이렉트 대상 경로"""
    if video_path.endswith("/"):
        video_path = video_path[:-1]
    return f"{video_path}/{video}"


async def emit_redirect(
    scope: Scope,
    receive: Receive,
    send: Send,
    video_path: str,
    match: VideoMatch,
) -> None:
    video_url = build_video_url(video_path, match.video)

    rule = "fallback" if match.is_fallback else "error_mapping"
    logger.info(
        f"에러 비디오로 리다이렉트: path={scope['path']}, rule={rule}, "
        f"pattern='{match.pattern}', video={match.video}, url={video_url}"
    )

    response = RedirectResponse(url=video_url, status_code=307)
    await response(scope, receive, send)
