"""src.core.config.py
.env 파일 또는 환경 변수에서 에러 비디오 미들웨어 설정을 읽어옵니다.

STRM_PATHS, ERROR_MAPPINGS 는 JSON 형식으로 지정합니다.
    STRM_PATHS='["/strm/", "/http/"]'
    ERROR_MAPPINGS='[["all tokens are expired", "token_expired.mp4"]]'
"""
from typing import List, Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.models.interceptor_config import DEFAULT_VIDEO_PATH


class Settings(BaseSettings):
    VIDEO_PATH: str = DEFAULT_VIDEO_PATH
    STRM_PATHS: Optional[List[str]] = None  # None: 기본값 ["/strm/"] 사용
    ERROR_MAPPINGS: Optional[List[Tuple[str, str]]] = None  # None: 기본 매핑 테이블 사용
    UPSTREAM_URL: str = "http://localhost:9999"  # Zurg 서버
    UPSTREAM_TIMEOUT: float = 30.0
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "dev"  # dev: 로컬, prod: 서버환경
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
settings = Settings()
