"""Application factory for the authentication service."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from cookbook_auth.api import api_router
from cookbook_auth.core.config import Settings, settings as default_settings
from cookbook_auth.core.database import build_engine
from cookbook_auth.core.security import PasswordHasher, hasher_from_settings
from cookbook_auth.services.auth import MISSING_FIELDS_MESSAGE
from cookbook_auth.store import CredentialStore, SQLCredentialStore

logger = logging.getLogger(__name__)


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable or wrongly typed bodies are reported like missing fields.
    logger.info("Rejected body for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": MISSING_FIELDS_MESSAGE},
    )


def create_app(
    *,
    settings: Optional[Settings] = None,
    store: Optional[CredentialStore] = None,
    hasher: Optional[PasswordHasher] = None,
    provision: bool = True,
) -> FastAPI:
    """Create the ASGI app, building the store and hasher from settings unless injected."""

    config = settings or default_settings

    if store is None:
        store = SQLCredentialStore(build_engine(config))
    if hasher is None:
        hasher = hasher_from_settings(config)

    app = FastAPI(title="Cookbook Auth")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)

    app.state.store = store
    app.state.hasher = hasher
    app.state.static_dir = config.static_dir

    @app.on_event("startup")
    def on_startup():
        create_schema = getattr(store, "create_schema", None)
        if provision and create_schema is not None:
            create_schema()
        logger.info("Database ready (%s)", type(store).__name__)

    @app.get("/health")
    def health():
        return {"message": "OK"}

    app.include_router(api_router)

    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.warning("Static directory %s not found; pages disabled", static_dir)

    return app


__all__ = ["create_app"]
