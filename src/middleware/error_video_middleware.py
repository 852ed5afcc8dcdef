"""src.middleware.error_video_middleware.py
Zurg STRM 엔드포인트의 500 에러를 가로채 에러 비디오로 리다이렉트하는 ASGI 미들웨어입니다.

처리 흐름
    요청 → STRM 경로 확인 → (불일치) 그대로 통과
                          → (일치) 응답 전체 버퍼링 → 500 이면 본문 분류
                                                    → (일치) 307 리다이렉트
                                                    → (불일치 / 500 아님) 원본 응답 재전송

NOTE: 가로채는 경로는 응답 전체를 메모리에 버퍼링하므로 스트리밍되지 않습니다.
      큰 응답일수록 메모리 사용량과 첫 바이트까지의 지연이 늘어납니다.
"""
import logging
from typing import Optional

from starlette.types import ASGIApp, Receive, Scope, Send

from src.core.exceptions import IncompleteResponseError
from src.models import InterceptorConfig
from src.services.classifier import decode_body, find_matching_video
from src.services.interceptor import CapturingSink, capture_scope, should_intercept
from src.services.redirector import emit_redirect
from src.services.replayer import replay_response

logger = logging.getLogger(__name__)

HTTP_500_INTERNAL_SERVER_ERROR = 500


class ErrorVideoMiddleware:
    """
    에러 비디오 미들웨어

    Usage:
        app.add_middleware(ErrorVideoMiddleware, config=InterceptorConfig.from_settings(settings))
    """

    def __init__(self, app: ASGIApp, config: Optional[InterceptorConfig] = None):
        self.app = app
        self.config = config if config is not None else InterceptorConfig()

    def reconfigure(self, config: InterceptorConfig) -> None:
        """새 설정 스냅샷으로 교체 (진행 중인 요청은 기존 스냅샷을 계속 사용)"""
        self.config = config
        logger.info(
            f"에러 비디오 설정 교체: strm_paths={list(config.strm_paths)}, "
            f"error_mappings={len(config.error_mappings)}개"
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # 요청 처리 동안 하나의 스냅샷만 사용
        config = self.config
        path = scope["path"]

        if not should_intercept(path, config.strm_paths):
            await self.app(scope, receive, send)
            return

        # downstream 예외는 그대로 전파 (분류하지 않음)
        sink = CapturingSink()
        await self.app(capture_scope(scope), receive, sink)
        captured = sink.response

        if not captured.started:
            raise IncompleteResponseError(f"downstream 응답이 없습니다: path={path}")
        if not captured.complete:
            raise IncompleteResponseError(f"downstream 응답 본문이 끝나지 않았습니다: path={path}")

        if captured.status == HTTP_500_INTERNAL_SERVER_ERROR:
            error_body = decode_body(captured.body)
            logger.info(f"STRM 엔드포인트 500 에러 감지: path={path}, error_body={error_body}")

            match = find_matching_video(error_body, config.error_mappings)
            if match is not None:
                await emit_redirect(scope, receive, send, config.video_path, match)
                return

            logger.info(f"일치하는 에러 비디오 없음, 원본 응답 전달: path={path}")

        await replay_response(captured, send)
