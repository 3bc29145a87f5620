"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from prefixcomplete.api.routes.autocomplete import router as autocomplete_router
from prefixcomplete.api.routes.health import router as health_router
from prefixcomplete.autocomplete.base import Autocompletor
from prefixcomplete.autocomplete.builder import AutocompleteBuilder, build_autocompletor
from prefixcomplete.autocomplete.errors import AutocompleteError
from prefixcomplete.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _load_index(settings: Settings) -> Autocompletor:
    path = settings.terms_path
    if path.exists():
        return AutocompleteBuilder(path, ac_settings=settings.autocomplete).build()
    logger.warning("No terms file at %s; serving an empty index", path)
    return build_autocompletor([], [], settings.autocomplete.default_implementation)


def create_app(
    settings: Settings | None = None,
    index: Optional[Autocompletor] = None,
) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    The index is built once here, before any request is served, and is
    only read afterwards.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="prefixcomplete API",
        version="0.1.0",
        description="Weighted prefix autocomplete",
    )

    # Shared state, read by routes via request.app.state
    app.state.settings = settings
    app.state.index = index if index is not None else _load_index(settings)

    @app.exception_handler(AutocompleteError)
    async def _contract_error(request: Request, exc: AutocompleteError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(health_router)
    app.include_router(autocomplete_router)

    return app
