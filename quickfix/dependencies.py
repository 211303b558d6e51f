from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quickfix.core.config import Settings
from quickfix.core.errors import QuickFixError


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuickFixError)
    async def handle_quickfix_error(
        _request: Request,
        exc: QuickFixError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_error(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        _request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code == 405:
            error = QuickFixError(
                status_code=405,
                message="Method not allowed. Use GET or POST.",
            )
        else:
            error = QuickFixError(status_code=exc.status_code, message=str(exc.detail))

        return JSONResponse(
            status_code=error.status_code,
            content=error.to_error(),
            headers=exc.headers,
        )
