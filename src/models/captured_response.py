"""src.models.captured_response
가로챈 downstream 응답을 담는 요청 단위 버퍼
"""
from typing import Any, Dict, List, Optional, Tuple


class CapturedResponse:
    """
    downstream 응답 버퍼

    한 요청의 처리 흐름에서만 사용되고 요청이 끝나면 버려집니다.
    분류는 body 가 모두 채워진 뒤에만 수행됩니다.
    """

    def __init__(self):
        self.status: Optional[int] = None
        self.headers: List[Tuple[bytes, bytes]] = []  # 원본 순서/중복 그대로
        self.trailers: bool = False
        self.body = bytearray()
        self.trailing_messages: List[Dict[str, Any]] = []  # body 이후의 메시지 (예: trailers)
        self.complete = False

    @property
    def started(self) -> bool:
        return self.status is not None
