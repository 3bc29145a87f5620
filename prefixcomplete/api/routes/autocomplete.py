"""Autocomplete API routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from prefixcomplete.api.schemas import (
    AutocompleteResponse,
    ErrorResponse,
    SuggestionResponse,
    TopMatchResponse,
)

router = APIRouter(tags=["autocomplete"])

_ERRORS = {400: {"model": ErrorResponse}}


def _check_prefix(request: Request, q: str) -> None:
    limit = request.app.state.settings.api.max_prefix_length
    if len(q) > limit:
        raise HTTPException(status_code=422, detail=f"Prefix longer than {limit} characters")


@router.get("/autocomplete", response_model=AutocompleteResponse, responses=_ERRORS)
def autocomplete(
    request: Request,
    q: str = Query(..., description="Prefix to complete"),
    top_k: int | None = Query(None, ge=1, description="Max suggestions"),
) -> AutocompleteResponse:
    """Return the heaviest completions for a prefix, heaviest first."""
    _check_prefix(request, q)
    ac = request.app.state.settings.autocomplete
    top_k = top_k or ac.max_suggestions
    if top_k > ac.max_top_k:
        raise HTTPException(status_code=422, detail=f"top_k may not exceed {ac.max_top_k}")

    index = request.app.state.index
    words = index.top_k_matches(q, top_k)
    return AutocompleteResponse(
        prefix=q,
        suggestions=[
            SuggestionResponse(term=w, score=round(index.weight_of(w), 2))
            for w in words
        ],
    )


@router.get("/autocomplete/top", response_model=TopMatchResponse, responses=_ERRORS)
def top_match(
    request: Request,
    q: str = Query(..., description="Prefix to complete"),
) -> TopMatchResponse:
    """Return the single heaviest completion for a prefix."""
    _check_prefix(request, q)
    return TopMatchResponse(prefix=q, match=request.app.state.index.top_match(q))
