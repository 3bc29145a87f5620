"""
Shared test fixtures for the prefixcomplete test suite.

Provides the small reference corpus used throughout the docs
(``{air:3, bat:2, bell:4, boy:1}``), a larger deterministic corpus,
and a terms file written to a temporary directory.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from prefixcomplete.autocomplete.binary_search import BinarySearchAutocomplete
from prefixcomplete.autocomplete.trie import TrieAutocomplete
from prefixcomplete.config.settings import Settings

SMALL_WORDS = ["air", "bat", "bell", "boy"]
SMALL_WEIGHTS = [3.0, 2.0, 4.0, 1.0]


@pytest.fixture(params=[TrieAutocomplete, BinarySearchAutocomplete], ids=["trie", "binary"])
def index_cls(request):
    """Each Autocompletor implementation in turn."""
    return request.param


@pytest.fixture
def small_index(index_cls):
    return index_cls(SMALL_WORDS, SMALL_WEIGHTS)


@pytest.fixture
def corpus() -> tuple[list[str], list[float]]:
    """
    A few hundred random words over a tiny alphabet, so prefixes share
    long runs and weights collide often.
    """
    rng = random.Random(1234)
    seen: dict[str, float] = {}
    while len(seen) < 300:
        word = "".join(rng.choice("abcd") for _ in range(rng.randint(1, 6)))
        seen[word] = float(rng.randint(0, 50))
    return list(seen), list(seen.values())


@pytest.fixture
def terms_file(tmp_path: Path) -> Path:
    """A terms file in the classic count-header, weight<TAB>word layout."""
    path = tmp_path / "terms.txt"
    path.write_text(
        "4\n"
        "3\tair\n"
        "2\tbat\n"
        "4\tbell\n"
        "1\tboy\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s


def _brute_force_top_k(words, weights, prefix, k):
    """Reference answer: (weight, word) pairs of the k heaviest matches."""
    matches = sorted(
        ((wt, w) for w, wt in zip(words, weights) if w.startswith(prefix)),
        key=lambda p: p[0],
        reverse=True,
    )
    return matches[:k]


@pytest.fixture
def brute_force_top_k():
    return _brute_force_top_k
