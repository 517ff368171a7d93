from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz():
    return {"status": "ok", "service": settings.SERVICE_NAME, "env": settings.ENV}


@router.get("/readyz")
def readyz():
    return {"ready": True}
