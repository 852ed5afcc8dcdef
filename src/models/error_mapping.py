"""src.models.error_mapping
에러 메시지 패턴 → 에러 비디오 파일명 매핑 스키마
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorMapping(BaseModel):
    """
    에러 매핑 규칙 하나

    pattern 은 대소문자 구분 없이 응답 본문에 포함되어 있는지 검사되며,
    설정된 순서대로 평가되어 가장 먼저 일치한 규칙의 video 가 선택됩니다.
    """
    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., description="에러 본문에서 찾을 부분 문자열")
    video: str = Field(..., description="VIDEO_PATH 기준 상대 파일명 (예: token_expired.mp4)")

    @field_validator("pattern", "video")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        # 빈 패턴은 모든 본문에 일치하므로 허용하지 않음
        if not value.strip():
            raise ValueError("must not be blank")
        return value
