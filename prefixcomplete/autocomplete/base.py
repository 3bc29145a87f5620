"""
The Autocompletor contract shared by every index implementation.

An index is built once from parallel ``words`` / ``weights`` sequences
and then answers two queries: the single heaviest word for a prefix,
and the top-k heaviest words for a prefix in descending weight order.
"No match" is an empty string or an empty list, never an exception.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from prefixcomplete.autocomplete.errors import (
    InvalidArgumentError,
    LengthMismatchError,
    NullInputError,
)


def check_weight(weight: Optional[float]) -> float:
    """Return *weight* as a float, rejecting ``None``, negatives and NaN."""
    if weight is None:
        raise NullInputError("weight is None")
    weight = float(weight)
    if math.isnan(weight) or weight < 0:
        raise InvalidArgumentError(f"weight must be non-negative, got {weight!r}")
    return weight


def check_word(word: Optional[str], what: str = "word") -> str:
    if word is None:
        raise NullInputError(f"{what} is None")
    return word


def check_k(k: int) -> int:
    if k < 0:
        raise InvalidArgumentError(f"k must be non-negative, got {k}")
    return k


def validate_terms(
    words: Optional[Sequence[str]],
    weights: Optional[Sequence[float]],
) -> list[tuple[str, float]]:
    """
    Validate construction arguments and pair them up.

    Raises:
        NullInputError: either sequence, or any word, is ``None``.
        LengthMismatchError: the sequences differ in length.
        InvalidArgumentError: any weight is negative.
    """
    if words is None or weights is None:
        raise NullInputError("One or more arguments None")
    if len(words) != len(weights):
        raise LengthMismatchError(
            f"{len(words)} words but {len(weights)} weights"
        )
    return [(check_word(w), check_weight(wt)) for w, wt in zip(words, weights)]


class Autocompletor(ABC):
    """Weighted prefix autocomplete over a fixed collection of terms."""

    #: Short name used by the builder, CLI and API to select a variant.
    name: str = ""

    @abstractmethod
    def top_match(self, prefix: str) -> str:
        """
        Return the heaviest word starting with *prefix*, or ``""``.

        Raises:
            NullInputError: *prefix* is ``None``.
        """

    @abstractmethod
    def top_k_matches(self, prefix: str, k: int) -> list[str]:
        """
        Return up to *k* words starting with *prefix*, heaviest first.

        Fewer than *k* words come back when fewer match; an empty list
        means nothing matched.

        Raises:
            NullInputError: *prefix* is ``None``.
            InvalidArgumentError: *k* is negative.
        """

    @abstractmethod
    def weight_of(self, word: str) -> float:
        """Return the stored weight of *word*, or ``0.0`` if it is absent."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of terms held by the index."""
