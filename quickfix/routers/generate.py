from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from quickfix.core.config import Settings
from quickfix.dependencies import get_settings
from quickfix.fixes.adapter import handle

router = APIRouter(prefix="/api", tags=["quickfix"])


@router.api_route("/generate", methods=["GET", "POST"])
async def generate(request: Request, settings: Settings = Depends(get_settings)):
    return await handle(request, settings)
