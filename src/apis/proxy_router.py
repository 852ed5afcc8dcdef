"""src.apis.proxy_router
모든 요청을 Zurg 서버(UPSTREAM_URL)로 전달하는 프록시 라우터

Zurg 응답은 받은 그대로 스트리밍하며, STRM 경로의 500 응답은
이 라우터를 감싸는 ErrorVideoMiddleware 가 처리합니다.
"""
import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from src.core.config import settings

logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)
router = APIRouter(tags=["Zurg 프록시"])

# 프록시가 그대로 전달하면 안 되는 헤더
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "transfer-encoding",
    "upgrade",
}
# 요청 헤더는 httpx 가 다시 계산
REQUEST_EXCLUDED_HEADERS = HOP_BY_HOP_HEADERS | {"host", "content-length"}


def create_upstream_client() -> httpx.AsyncClient:
    """Zurg 서버 요청용 httpx 클라이언트 (앱 lifespan 동안 유지)"""
    return httpx.AsyncClient(
        base_url=settings.UPSTREAM_URL,
        timeout=settings.UPSTREAM_TIMEOUT,
        follow_redirects=False,
    )


def get_upstream_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.upstream_client


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def proxy_to_upstream(
    path: str,
    request: Request,
    client: httpx.AsyncClient = Depends(get_upstream_client),
):
    """
    요청을 Zurg 서버로 전달하고 응답을 스트리밍으로 반환합니다.

    본문은 디코딩하지 않은 원본 바이트(aiter_raw)로 전달하므로
    content-encoding / content-length 헤더도 그대로 유지됩니다.

    ------------------------------------------------------------
    에러 코드
    - 504 GATEWAY TIMEOUT: Zurg 서버 응답 시간 초과
    - 502 BAD GATEWAY: Zurg 서버 연결 실패
    """
    url = f"/{path}"
    if request.url.query:
        url = f"{url}?{request.url.query}"

    headers = [
        (key, value)
        for key, value in request.headers.items()
        if key.lower() not in REQUEST_EXCLUDED_HEADERS
    ]

    upstream_request = client.build_request(
        request.method,
        url,
        headers=headers,
        content=await request.body(),
    )
    try:
        upstream = await client.send(upstream_request, stream=True)
    except httpx.TimeoutException:
        logger.error(f"[Proxy] Zurg 응답 시간 초과: {request.method} {url}")
        raise HTTPException(status_code=504, detail="Zurg 서버 응답 시간이 초과되었습니다")
    except httpx.RequestError as e:
        logger.error(f"[Proxy] Zurg 요청 실패: {request.method} {url}, 오류: {type(e).__name__} - {str(e)}")
        raise HTTPException(status_code=502, detail="Zurg 서버에 연결할 수 없습니다")

    logger.debug(f"[Proxy] {request.method} {url} -> {upstream.status_code}")

    response = StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        background=BackgroundTask(upstream.aclose),
    )
    response.raw_headers.extend(
        (key.encode("latin-1"), value.encode("latin-1"))
        for key, value in upstream.headers.multi_items()
        if key.lower() not in HOP_BY_HOP_HEADERS
    )
    return response
