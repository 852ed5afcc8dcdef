"""src.main
Zurg 에러 비디오 프록시 애플리케이션 진입점

    uvicorn src.main:app --host 0.0.0.0 --port 8080
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from src.apis import health_router, proxy_router
from src.core.config import settings
from src.middleware.error_video_middleware import ErrorVideoMiddleware
from src.models import InterceptorConfig

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Zurg 클라이언트를 앱 수명 동안 유지 (스트리밍 응답이 끝날 때까지 연결 필요)"""
    async with proxy_router.create_upstream_client() as client:
        app.state.upstream_client = client
        yield


def create_app(config: Optional[InterceptorConfig] = None) -> FastAPI:
    """
    FastAPI 앱을 생성합니다.

    Args:
        config: 에러 비디오 설정 (None 이면 Settings 에서 생성)

    Raises:
        ConfigurationError: 에러 매핑 설정이 유효하지 않은 경우 (미들웨어 활성화 안 함)
    """
    if config is None:
        config = InterceptorConfig.from_settings(settings)

    app = FastAPI(title="Zurg Error Video Proxy", lifespan=lifespan)
    # 라우트 순서 주의: proxy_router 는 모든 경로를 받으므로 마지막에 등록
    app.include_router(health_router.router)
    app.include_router(proxy_router.router)
    app.add_middleware(ErrorVideoMiddleware, config=config)

    logger.info(
        f"에러 비디오 미들웨어 활성화: video_path={config.video_path}, "
        f"strm_paths={list(config.strm_paths)}, error_mappings={len(config.error_mappings)}개, "
        f"upstream={settings.UPSTREAM_URL}"
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=settings.HOST, port=settings.PORT)
