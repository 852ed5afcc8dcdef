"""src.models.interceptor_config
에러 비디오 미들웨어 설정 스냅샷

요청 처리 중에는 읽기 전용으로 공유되며, 재설정 시에는 새 인스턴스를 만들어
미들웨어의 참조를 통째로 교체합니다.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.exceptions import ConfigurationError
from src.models.error_mapping import ErrorMapping

# =============================================
# 기본값 (Defaults)
# =============================================
DEFAULT_VIDEO_PATH = "/etc/zurg/zurg.git/error_videos"
DEFAULT_STRM_PATHS: Tuple[str, ...] = ("/strm/",)
DEFAULT_ERROR_MAPPINGS: Tuple[ErrorMapping, ...] = tuple(
    ErrorMapping(pattern=pattern, video=video)
    for pattern, video in (
        ("all tokens are expired", "token_expired.mp4"),
        ("bytes_limit_reached", "quota_exceeded.mp4"),
        ("invalid_download_code", "expired_link.mp4"),
        ("failed_generation", "generation_failed.mp4"),
        ("traffic_exhausted", "traffic_limit.mp4"),
        ("unrestrict link request failed", "network_error.mp4"),
        ("unreadable body", "server_error.mp4"),
        ("undecodable response", "server_error.mp4"),
        ("timeout", "timeout_error.mp4"),
        ("connection reset by peer", "network_error.mp4"),
        ("EOF", "network_error.mp4"),
        ("broken pipe", "network_error.mp4"),
    )
)


class InterceptorConfig(BaseModel):
    """
    미들웨어 설정 스냅샷 (불변)

    Snippet
    {
        "video_path": "/etc/zurg/zurg.git/error_videos",
        "strm_paths": ["/strm/"],
        "error_mappings": [
            {"pattern": "all tokens are expired", "video": "token_expired.mp4"}
        ]
    }
    """
    model_config = ConfigDict(frozen=True)

    video_path: str = Field(default=DEFAULT_VIDEO_PATH, description="에러 비디오 기본 경로")
    strm_paths: Tuple[str, ...] = Field(default=DEFAULT_STRM_PATHS, description="가로챌 경로 prefix 목록")
    error_mappings: Tuple[ErrorMapping, ...] = Field(
        default=DEFAULT_ERROR_MAPPINGS, description="순서가 있는 에러 매핑 규칙"
    )

    @field_validator("video_path")
    @classmethod
    def default_when_empty(cls, value: str) -> str:
        return value or DEFAULT_VIDEO_PATH

    @classmethod
    def from_settings(cls, settings) -> "InterceptorConfig":
        """
        Settings 로부터 설정 스냅샷을 생성합니다.

        STRM_PATHS, ERROR_MAPPINGS 가 지정되지 않은 경우(None) 기본값을 사용하며,
        ERROR_MAPPINGS 를 하나라도 지정하면 기본 매핑 테이블 전체를 대체합니다.

        Args:
            settings: src.core.config.Settings

        Returns:
            InterceptorConfig

        Raises:
            ConfigurationError: 매핑 규칙이 유효하지 않은 경우
        """
        values = {"video_path": settings.VIDEO_PATH}
        if settings.STRM_PATHS is not None:
            values["strm_paths"] = tuple(settings.STRM_PATHS)

        try:
            if settings.ERROR_MAPPINGS is not None:
                values["error_mappings"] = tuple(
                    ErrorMapping(pattern=pattern, video=video)
                    for pattern, video in settings.ERROR_MAPPINGS
                )
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"에러 비디오 설정이 올바르지 않습니다: {e}") from e
