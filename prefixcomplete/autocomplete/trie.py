"""
Prefix tree with per-node maximum-weight augmentation.

Every node caches ``subtree_max_weight``: the heaviest weight among the
words ending in its subtree (itself included).  That cache lets
``top_match`` walk straight down to the best word and lets
``top_k_matches`` run a best-first search that never expands a subtree
before a heavier one.

Nodes live in an arena (a flat list) and refer to each other by index.
The ``parent`` index is only read when an insert lowers an existing
word's weight and the cached maxima above it have to be re-derived.

Queries treat ``subtree_max_weight`` as frozen, so an insert must not
run concurrently with queries or with another insert.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from prefixcomplete.autocomplete.base import (
    Autocompletor,
    check_k,
    check_weight,
    check_word,
    validate_terms,
)

logger = logging.getLogger(__name__)

_ROOT = 0


@dataclass
class TrieNode:
    """Single node in the trie, addressed by its arena index."""

    char: str
    parent: Optional[int] = None
    children: dict[str, int] = field(default_factory=dict)
    is_word: bool = False
    word: str = ""
    weight: float = 0.0
    subtree_max_weight: float = 0.0


class TrieAutocomplete(Autocompletor):
    """Autocompletor backed by a max-weight-augmented prefix tree."""

    name = "trie"

    def __init__(
        self,
        words: Optional[Sequence[str]],
        weights: Optional[Sequence[float]],
    ) -> None:
        terms = validate_terms(words, weights)
        self._nodes: list[TrieNode] = [TrieNode(char="")]
        self._size = 0
        for word, weight in terms:
            self.insert(word, weight)

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Nodes in the arena, root included."""
        return len(self._nodes)

    # ---- construction ----

    def insert(self, word: str, weight: float) -> None:
        """
        Add *word* with *weight*, or update its weight if already present.

        Raises:
            NullInputError: *word* is ``None``.
            InvalidArgumentError: *weight* is negative.
        """
        word = check_word(word)
        weight = check_weight(weight)

        nodes = self._nodes
        current = _ROOT
        for ch in word:
            node = nodes[current]
            if node.subtree_max_weight < weight:
                node.subtree_max_weight = weight
            child = node.children.get(ch)
            if child is None:
                child = len(nodes)
                nodes.append(
                    TrieNode(char=ch, parent=current, subtree_max_weight=weight)
                )
                node.children[ch] = child
            current = child

        node = nodes[current]
        old_weight = node.weight if node.is_word else None
        if old_weight is None:
            self._size += 1
        node.is_word = True
        node.word = word
        node.weight = weight
        if node.subtree_max_weight < weight:
            node.subtree_max_weight = weight

        if old_weight is not None and old_weight > weight:
            logger.debug(
                "Weight of %r lowered %s -> %s; repairing subtree maxima",
                word, old_weight, weight,
            )
            self._repair_upward(current)

    def _repair_upward(self, index: Optional[int]) -> None:
        """Recompute subtree maxima from *index* up to the root, one level at a time."""
        nodes = self._nodes
        while index is not None:
            node = nodes[index]
            best = node.weight if node.is_word else 0.0
            for child in node.children.values():
                if nodes[child].subtree_max_weight > best:
                    best = nodes[child].subtree_max_weight
            node.subtree_max_weight = best
            index = node.parent

    # ---- queries ----

    def _find(self, prefix: str) -> Optional[int]:
        """Return the arena index of the node spelling *prefix*, if any."""
        current = _ROOT
        for ch in prefix:
            current = self._nodes[current].children.get(ch)
            if current is None:
                return None
        return current

    def top_match(self, prefix: str) -> str:
        prefix = check_word(prefix, "prefix")
        current = self._find(prefix)
        # only the root of an empty trie has no word beneath it
        if current is None or self._size == 0:
            return ""

        nodes = self._nodes
        node = nodes[current]
        while not (node.is_word and node.weight == node.subtree_max_weight):
            target = node.subtree_max_weight
            node = next(
                nodes[child]
                for child in node.children.values()
                if nodes[child].subtree_max_weight == target
            )
        return node.word

    def top_k_matches(self, prefix: str, k: int) -> list[str]:
        prefix = check_word(prefix, "prefix")
        k = check_k(k)
        start = self._find(prefix)
        if start is None or k == 0:
            return []

        nodes = self._nodes
        counter = itertools.count()
        # (-priority, tiebreak, is_word_entry, node index)
        heap: list[tuple[float, int, bool, int]] = [
            (-nodes[start].subtree_max_weight, next(counter), False, start)
        ]
        words: list[str] = []
        while heap and len(words) < k:
            _, _, is_word_entry, index = heapq.heappop(heap)
            node = nodes[index]
            if is_word_entry:
                words.append(node.word)
                continue
            if node.is_word:
                heapq.heappush(heap, (-node.weight, next(counter), True, index))
            for child in node.children.values():
                heapq.heappush(
                    heap,
                    (-nodes[child].subtree_max_weight, next(counter), False, child),
                )
        return words

    def weight_of(self, word: str) -> float:
        word = check_word(word)
        index = self._find(word)
        if index is None or not self._nodes[index].is_word:
            return 0.0
        return self._nodes[index].weight
