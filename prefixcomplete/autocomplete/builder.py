"""
Autocomplete index builder.

Loads ``(word, weight)`` pairs from a terms file and builds whichever
index variant the caller (or the settings) selects.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from prefixcomplete.autocomplete.base import Autocompletor
from prefixcomplete.autocomplete.binary_search import BinarySearchAutocomplete
from prefixcomplete.autocomplete.errors import InvalidArgumentError
from prefixcomplete.autocomplete.trie import TrieAutocomplete
from prefixcomplete.config.settings import AutocompleteSettings, get_settings

logger = logging.getLogger(__name__)

IMPLEMENTATIONS: dict[str, type[Autocompletor]] = {
    TrieAutocomplete.name: TrieAutocomplete,
    BinarySearchAutocomplete.name: BinarySearchAutocomplete,
}


def build_autocompletor(
    words: Optional[Sequence[str]],
    weights: Optional[Sequence[float]],
    implementation: Optional[str] = None,
) -> Autocompletor:
    """Build an index of the named variant (default from settings)."""
    implementation = implementation or get_settings().autocomplete.default_implementation
    cls = IMPLEMENTATIONS.get(implementation)
    if cls is None:
        raise InvalidArgumentError(
            f"Unknown implementation {implementation!r}; "
            f"expected one of {sorted(IMPLEMENTATIONS)}"
        )
    start = time.perf_counter()
    index = cls(words, weights)
    logger.info(
        "Built %s index (%d terms) in %.3fs",
        implementation, len(index), time.perf_counter() - start,
    )
    return index


def load_terms(path: Path) -> tuple[list[str], list[float]]:
    """
    Read parallel word/weight lists from a terms file.

    Format: an optional first line holding the term count, then one
    ``weight<TAB>word`` pair per line.  Blank lines are skipped and
    words are stripped of surrounding whitespace.
    """
    words: list[str] = []
    weights: list[float] = []
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            if "\t" not in line:
                if lineno == 1 and line.isdigit():
                    continue
                raise ValueError(f"{path}:{lineno}: expected 'weight<TAB>word'")
            weight_text, word = line.split("\t", 1)
            try:
                weight = float(weight_text)
            except ValueError:
                raise ValueError(f"{path}:{lineno}: bad weight {weight_text!r}") from None
            words.append(word.strip())
            weights.append(weight)
    logger.info("Loaded %d terms from %s", len(words), path)
    return words, weights


class AutocompleteBuilder:
    """Build an Autocompletor from a terms file."""

    def __init__(
        self,
        terms_path: Path,
        implementation: Optional[str] = None,
        ac_settings: Optional[AutocompleteSettings] = None,
    ) -> None:
        self._ac = ac_settings or get_settings().autocomplete
        self._terms_path = terms_path
        self._implementation = implementation or self._ac.default_implementation
        self._build_seconds: Optional[float] = None
        self._term_count = 0

    def build(self) -> Autocompletor:
        """Load the terms file and build the index."""
        start = time.perf_counter()
        words, weights = load_terms(self._terms_path)
        index = build_autocompletor(words, weights, self._implementation)
        self._build_seconds = time.perf_counter() - start
        self._term_count = len(index)
        return index

    def summary(self) -> dict:
        """Describe the last build."""
        return {
            "implementation": self._implementation,
            "term_count": self._term_count,
            "file_path": str(self._terms_path),
            "build_seconds": round(self._build_seconds or 0.0, 4),
        }
