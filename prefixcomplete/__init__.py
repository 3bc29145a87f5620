"""Weighted prefix autocomplete: prefix-tree and sorted-array indexes."""

__version__ = "0.1.0"
