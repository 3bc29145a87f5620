"""
Term records and the comparators used to order them.

Comparators follow the classic ``cmp(a, b) -> int`` shape (negative,
zero, positive) so the binary search helpers can be parameterized by
any ordering; wrap with :func:`functools.cmp_to_key` to sort.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

TermComparator = Callable[["Term", "Term"], int]


@dataclass(frozen=True)
class Term:
    """A word and its non-negative weight."""

    word: str
    weight: float


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def word_order(a: Term, b: Term) -> int:
    """Natural order: lexicographic by word."""
    return _cmp(a.word, b.word)


def prefix_order(length: int) -> TermComparator:
    """
    Return a comparator that only looks at the first *length* characters.

    Two terms compare equal when their words share those leading
    characters, which makes every word starting with a prefix of that
    length a single contiguous run in a word-sorted array.
    """
    if length < 0:
        raise ValueError(f"prefix length must be non-negative, got {length}")

    def compare(a: Term, b: Term) -> int:
        return _cmp(a.word[:length], b.word[:length])

    return compare


def reverse_weight_order(a: Term, b: Term) -> int:
    """Heaviest first."""
    return _cmp(b.weight, a.weight)
