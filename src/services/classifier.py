"""src.services.classifier.py
Zurg 가 돌려준 500 응답 본문(사람이 읽는 에러 메시지)을 에러 매핑 규칙과 비교하여
재생할 에러 비디오를 선택하는 모듈입니다.

NOTE: 부분 문자열 매칭이므로 관련 없는 문장 속 "timeout" 같은 단어에도 일치할 수 있습니다.
"""
# =============================================
# 설정 상수 (Constants)
# =============================================
FALLBACK_PHRASE = "failed to unrestrict link"
FALLBACK_VIDEO = "cannot_unrestrict_file.mp4"


import logging
from typing import Iterable, Optional

from src.models import ErrorMapping, VideoMatch

logger = logging.getLogger(__name__)


def decode_body(body: bytes) -> str:
    """
    응답 본문을 텍스트로 변환합니다.

    잘못된 UTF-8 바이트는 surrogateescape 로 보존되어 예외 없이 원본 바이트 기준으로 매칭됩니다.
    """
    return bytes(body).decode("utf-8", errors="surrogateescape")


def find_matching_video(error_body: str, error_mappings: Iterable[ErrorMapping]) -> Optional[VideoMatch]:
    """
    에러 본문과 일치하는 에러 비디오를 찾습니다.

    Args:
        error_body: 500 응답 본문 텍스트
        error_mappings: 순서가 있는 에러 매핑 규칙

    Returns:
        VideoMatch: 처음으로 일치한 규칙, 없으면 fallback 규칙
        None: 어떤 규칙에도 일치하지 않는 경우 (원본 응답을 그대로 전달)
    """
    error_body = error_body.lower()

    # 설정 순서대로 검사, 먼저 일치한 규칙 우선
    for mapping in error_mappings:
        if mapping.pattern.lower() in error_body:
            return VideoMatch(pattern=mapping.pattern, video=mapping.video)

    # STRM 에러 기본 fallback
    if FALLBACK_PHRASE in error_body:
        logger.debug(f"설정된 에러 매핑 없음, fallback 적용: video={FALLBACK_VIDEO}")
        return VideoMatch(pattern=FALLBACK_PHRASE, video=FALLBACK_VIDEO, is_fallback=True)

    return None
