# hexgallery/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexgallery.common.settings import get_settings
from hexgallery.services.api.errors import setup_exception_handlers
from hexgallery.services.api.routers import galleries, health

cfg = get_settings()
dev = cfg.app_env.lower() == "development"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hexgallery API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    setup_exception_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(galleries.router)
    return app

app = create_app()
