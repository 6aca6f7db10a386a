"""Health Check Controller."""

from fastapi import APIRouter

from waste.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def ready() -> dict:
    """서비스 준비 상태 체크."""
    return {"status": "ready"}
