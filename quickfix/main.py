from __future__ import annotations

from fastapi import FastAPI

from quickfix.core.config import Settings
from quickfix.core.logging import configure_logging
from quickfix.dependencies import register_exception_handlers
from quickfix.internal import admin
from quickfix.routers import generate


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="quickfix",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(generate.router)
    app.include_router(admin.router)

    return app


app = create_app()
