"""Tests for Term comparators."""

from __future__ import annotations

from functools import cmp_to_key

import pytest

from prefixcomplete.autocomplete.term import (
    Term,
    prefix_order,
    reverse_weight_order,
    word_order,
)


class TestComparators:
    def test_word_order(self):
        assert word_order(Term("apple", 9), Term("banana", 1)) < 0
        assert word_order(Term("b", 0), Term("b", 5)) == 0
        assert word_order(Term("c", 0), Term("b", 0)) > 0

    def test_prefix_order_ignores_tail(self):
        cmp = prefix_order(2)
        assert cmp(Term("bell", 0), Term("beta", 0)) == 0
        assert cmp(Term("bat", 0), Term("bell", 0)) < 0
        assert cmp(Term("cab", 0), Term("bz", 0)) > 0

    def test_prefix_order_shorter_word(self):
        cmp = prefix_order(3)
        assert cmp(Term("be", 0), Term("bel", 0)) < 0
        assert cmp(Term("bell", 0), Term("bel", 0)) == 0

    def test_prefix_order_zero_length(self):
        assert prefix_order(0)(Term("a", 0), Term("z", 0)) == 0

    def test_prefix_order_negative_length(self):
        with pytest.raises(ValueError):
            prefix_order(-1)

    def test_reverse_weight_order_sorts_heaviest_first(self):
        terms = [Term("a", 1), Term("b", 3), Term("c", 2)]
        ranked = sorted(terms, key=cmp_to_key(reverse_weight_order))
        assert [t.word for t in ranked] == ["b", "c", "a"]

    def test_term_is_immutable(self):
        with pytest.raises(AttributeError):
            Term("a", 1).weight = 2
