"""Search debounce and the pure filter/sort view derivation."""

from .debounce import SEARCH_DEBOUNCE_DELAY, Debouncer
from .view import DerivedView, derive_view, filter_records, sort_records, title_sort_key

__all__ = [
    "SEARCH_DEBOUNCE_DELAY",
    "Debouncer",
    "DerivedView",
    "derive_view",
    "filter_records",
    "sort_records",
    "title_sort_key",
]
