"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel


class SuggestionResponse(BaseModel):
    """A single autocomplete suggestion."""

    term: str
    score: float


class AutocompleteResponse(BaseModel):
    """Top-k autocomplete results, heaviest first."""

    prefix: str
    suggestions: list[SuggestionResponse]


class TopMatchResponse(BaseModel):
    """The heaviest completion; ``match`` is empty when nothing matches."""

    prefix: str
    match: str


class HealthResponse(BaseModel):
    status: str
    implementation: str
    term_count: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
