"""
Errors raised when a caller breaks the autocomplete contract.

Each error also derives from the matching built-in exception, so
``except TypeError`` / ``except ValueError`` keep working for callers
that do not know about this package.
"""

from __future__ import annotations


class AutocompleteError(Exception):
    """Base class for all autocomplete contract violations."""


class NullInputError(AutocompleteError, TypeError):
    """A required word, prefix, or sequence argument was ``None``."""


class InvalidArgumentError(AutocompleteError, ValueError):
    """A weight was negative (or NaN), or a count was negative."""


class LengthMismatchError(AutocompleteError, ValueError):
    """Parallel words/weights sequences had different lengths."""
