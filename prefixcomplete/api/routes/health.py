"""Health route."""

from __future__ import annotations

from fastapi import APIRouter, Request

from prefixcomplete.api.schemas import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """Liveness check plus a glance at the loaded index."""
    index = request.app.state.index
    return HealthResponse(status="ok", implementation=index.name, term_count=len(index))
