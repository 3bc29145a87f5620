"""Weighted prefix autocomplete indexes."""

from prefixcomplete.autocomplete.base import Autocompletor
from prefixcomplete.autocomplete.binary_search import (
    BinarySearchAutocomplete,
    first_index_of,
    last_index_of,
)
from prefixcomplete.autocomplete.builder import (
    IMPLEMENTATIONS,
    AutocompleteBuilder,
    build_autocompletor,
    load_terms,
)
from prefixcomplete.autocomplete.errors import (
    AutocompleteError,
    InvalidArgumentError,
    LengthMismatchError,
    NullInputError,
)
from prefixcomplete.autocomplete.term import Term
from prefixcomplete.autocomplete.trie import TrieAutocomplete

__all__ = [
    "AutocompleteBuilder",
    "AutocompleteError",
    "Autocompletor",
    "BinarySearchAutocomplete",
    "IMPLEMENTATIONS",
    "InvalidArgumentError",
    "LengthMismatchError",
    "NullInputError",
    "Term",
    "TrieAutocomplete",
    "build_autocompletor",
    "first_index_of",
    "last_index_of",
    "load_terms",
]
