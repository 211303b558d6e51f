from __future__ import annotations

from fastapi import APIRouter, Depends

from quickfix.core.config import Settings
from quickfix.dependencies import get_settings

router = APIRouter(prefix="/internal", tags=["internal"])


@router.get("/healthz")
async def healthz(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    return {
        "status": "ok",
        "model": settings.generation.model_id,
        "configured": bool(settings.api_key and settings.gemini_api_key),
    }
