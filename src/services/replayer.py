"""src.services.replayer.py
분류가 적용되지 않은 응답을 캡처한 그대로 클라이언트에게 다시 전송합니다.
"""
from starlette.types import Send

from src.models import CapturedResponse


async def replay_response(captured: CapturedResponse, send: Send) -> None:
    """
    캡처한 status, headers, body 를 한 번에 전송합니다.

    헤더는 캡처된 순서와 중복을 그대로 유지하며, 전송 중 발생한 예외는 재시도 없이 전파됩니다.
    """
    start = {
        "type": "http.response.start",
        "status": captured.status,
        "headers": captured.headers,
    }
    if captured.trailers:
        start["trailers"] = True

    await send(start)
    await send({"type": "http.response.body", "body": bytes(captured.body), "more_body": False})

    for message in captured.trailing_messages:
        await send(message)
