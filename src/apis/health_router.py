"""src.apis.health_router
서버 상태 확인 라우터
"""
from fastapi import APIRouter

router = APIRouter(tags=["상태 확인 API"])


@router.get("/health", status_code=200)
async def health_check():
    """프록시 서버 상태 확인"""
    return {"status": "ok"}
