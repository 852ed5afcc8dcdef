"""src.models.video_match
에러 본문 분류 결과 스키마
"""
from pydantic import BaseModel, ConfigDict, Field


class VideoMatch(BaseModel):
    """분류기가 선택한 에러 비디오와 일치한 규칙"""
    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., description="일치한 패턴 (fallback 이면 fallback 문구)")
    video: str = Field(..., description="리다이렉트할 비디오 파일명")
    is_fallback: bool = Field(default=False, description="기본 fallback 규칙으로 선택되었는지 여부")
