"""
Sorted-array autocomplete.

Terms are sorted by word once at construction.  Every word starting
with a prefix of length L then forms one contiguous run, found with two
comparator-parameterized binary searches under the first-L-characters
ordering; the run is ranked by weight afterwards.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Optional, Sequence

from prefixcomplete.autocomplete.base import (
    Autocompletor,
    check_k,
    check_word,
    validate_terms,
)
from prefixcomplete.autocomplete.term import (
    Term,
    TermComparator,
    prefix_order,
    reverse_weight_order,
    word_order,
)

_BY_WEIGHT_DESC = cmp_to_key(reverse_weight_order)


def first_index_of(
    a: Sequence[Term],
    key: Term,
    comparator: TermComparator,
) -> int:
    """
    Return the first index ``i`` with ``comparator(a[i], key) == 0``, or -1.

    *a* must be sorted consistently with *comparator*.  Makes at most
    ``1 + ceil(log2(len(a) + 1))`` comparator calls.
    """
    # invariant: a[low] < key (or low == -1), a[high] >= key (or high == len(a))
    low, high = -1, len(a)
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(a[mid], key) < 0:
            low = mid
        else:
            high = mid
    if high < len(a) and comparator(a[high], key) == 0:
        return high
    return -1


def last_index_of(
    a: Sequence[Term],
    key: Term,
    comparator: TermComparator,
) -> int:
    """The same as :func:`first_index_of`, but for the last equal index."""
    # invariant: a[low] <= key (or low == -1), a[high] > key (or high == len(a))
    low, high = -1, len(a)
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(a[mid], key) <= 0:
            low = mid
        else:
            high = mid
    if low >= 0 and comparator(a[low], key) == 0:
        return low
    return -1


class BinarySearchAutocomplete(Autocompletor):
    """Autocompletor backed by a lexicographically sorted array of terms."""

    name = "binary"

    def __init__(
        self,
        words: Optional[Sequence[str]],
        weights: Optional[Sequence[float]],
    ) -> None:
        terms = [Term(word, weight) for word, weight in validate_terms(words, weights)]
        self._terms: tuple[Term, ...] = tuple(sorted(terms, key=cmp_to_key(word_order)))

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def terms(self) -> tuple[Term, ...]:
        """The word-sorted terms."""
        return self._terms

    def _matching(self, prefix: str) -> list[Term]:
        """Return the word-ordered run of terms starting with *prefix*."""
        probe = Term(prefix, 0.0)
        comparator = prefix_order(len(prefix))
        first = first_index_of(self._terms, probe, comparator)
        if first == -1:
            return []
        last = last_index_of(self._terms, probe, comparator)
        return list(self._terms[first:last + 1])

    def top_match(self, prefix: str) -> str:
        prefix = check_word(prefix, "prefix")
        matches = self._matching(prefix)
        if not matches:
            return ""
        # min() keeps the first of equal keys, i.e. the lexicographically smallest
        return min(matches, key=_BY_WEIGHT_DESC).word

    def top_k_matches(self, prefix: str, k: int) -> list[str]:
        prefix = check_word(prefix, "prefix")
        k = check_k(k)
        matches = self._matching(prefix)
        # stable sort: equal weights stay in word order
        matches.sort(key=_BY_WEIGHT_DESC)
        return [t.word for t in matches[:k]]

    def weight_of(self, word: str) -> float:
        word = check_word(word)
        index = first_index_of(self._terms, Term(word, 0.0), word_order)
        if index == -1:
            return 0.0
        return self._terms[index].weight
