"""FastAPI application: text rendering over HTTP."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from astext.api.v1 import v1_router
from astext.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; CORS is mounted only when origins are configured."""
    settings = settings or get_settings()
    application = FastAPI(
        title="astext",
        version=VERSION,
        description="Render HTML trees as text, the way text-mode browsers do",
    )

    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    if origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["POST", "GET"],
            allow_headers=["*"],
        )
    else:
        logger.info("CORS disabled: no allowed origins configured")

    application.include_router(v1_router)

    @application.get("/health", tags=["system"])
    async def health_check() -> dict:
        return {"status": "ok", "version": VERSION}

    return application


app = create_app()
