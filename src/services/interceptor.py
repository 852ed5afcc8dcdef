"""src.services.interceptor.py
요청 경로가 STRM 엔드포인트인지 판단하고,
downstream 응답을 클라이언트 대신 버퍼에 담는 capturing sink 를 제공합니다.
"""
import logging
from typing import Iterable

from starlette.types import Message, Scope

from src.models import CapturedResponse

logger = logging.getLogger(__name__)

# 버퍼링할 수 없는 방식으로 body 를 보내게 하는 ASGI 확장
UNBUFFERABLE_EXTENSIONS = ("http.response.pathsend", "http.response.zerocopysend")


def should_intercept(path: str, strm_paths: Iterable[str]) -> bool:
    """대소문자를 구분하는 단순 prefix 비교 (trailing slash 정규화 없음)"""
    return any(path.startswith(prefix) for prefix in strm_paths)


def capture_scope(scope: Scope) -> Scope:
    """
    downstream 에 전달할 scope 를 만듭니다.

    FileResponse 등이 pathsend 로 파일을 직접 보내면 본문을 검사할 수 없으므로
    해당 확장을 제거하여 항상 http.response.body 메시지로 본문을 받도록 합니다.
    """
    extensions = scope.get("extensions")
    if not extensions or not any(name in extensions for name in UNBUFFERABLE_EXTENSIONS):
        return scope

    logger.debug(f"버퍼링을 위해 응답 전송 확장 제거: path={scope.get('path')}")
    scope = dict(scope)
    scope["extensions"] = {
        name: value for name, value in extensions.items() if name not in UNBUFFERABLE_EXTENSIONS
    }
    return scope


class CapturingSink:
    """
    실제 send 대신 downstream 앱에 전달되는 버퍼

    클라이언트에게는 아무 바이트도 전송하지 않으며,
    응답 전체가 CapturedResponse 에 쌓입니다.
    """

    def __init__(self):
        self.response = CapturedResponse()

    async def __call__(self, message: Message) -> None:
        message_type = message["type"]

        if message_type == "http.response.start":
            self.response.status = message["status"]
            self.response.headers = list(message.get("headers", []))
            self.response.trailers = message.get("trailers", False)

        elif message_type == "http.response.body":
            self.response.body.extend(message.get("body", b""))
            if not message.get("more_body", False):
                self.response.complete = True

        else:
            self.response.trailing_messages.append(message)
