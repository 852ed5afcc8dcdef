"""src.models
미들웨어 설정 및 요청 처리에 사용되는 스키마 정의
"""
from src.models.error_mapping import ErrorMapping
from src.models.video_match import VideoMatch
from src.models.captured_response import CapturedResponse
from src.models.interceptor_config import InterceptorConfig

__all__ = [
    "ErrorMapping",
    "VideoMatch",
    "CapturedResponse",
    "InterceptorConfig",
]
