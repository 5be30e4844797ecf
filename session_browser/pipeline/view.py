"""
Derived view: filter -> sort -> counts.

Pure functions over a record sequence and the UI inputs. Nothing here
mutates the records it is given; every call returns new sequences.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models import SessionRecord, SortOrder


@dataclass(frozen=True)
class DerivedView:
    records: Tuple[SessionRecord, ...]
    search_term: str
    sort_order: SortOrder
    total_count: int
    filtered_count: int
    no_results: bool


def normalize_term(term: str) -> str:
    return term or ""


def title_sort_key(title: str) -> Tuple[str, str]:
    """
    Case-insensitive ordering first, exact text as the final tie-break.

    Approximates a locale collation on code points only: "A" sorts before
    "a" on an exact-text tie, and accented letters sort after "z".
    """
    return (title.casefold(), title)


def filter_records(records: Sequence[SessionRecord], term: str) -> List[SessionRecord]:
    """Case-insensitive substring match on title, whitespace included. Only "" matches everything."""
    needle = normalize_term(term).casefold()
    if not needle:
        return list(records)
    return [r for r in records if needle in r.title.casefold()]


def sort_records(records: Sequence[SessionRecord], order: SortOrder = SortOrder.DESC) -> List[SessionRecord]:
    """
    Sort by popularity in the requested direction.

    Equal popularity falls back to title ascending in both directions: the
    title pass runs first and the popularity pass is stable, including with
    reverse=True.
    """
    by_title = sorted(records, key=lambda r: title_sort_key(r.title))
    return sorted(by_title, key=lambda r: r.popularity, reverse=(order is SortOrder.DESC))


def derive_view(
    records: Sequence[SessionRecord],
    search_term: str = "",
    sort_order: SortOrder = SortOrder.DESC,
) -> DerivedView:
    term = normalize_term(search_term)
    filtered = filter_records(records, term)
    ordered = sort_records(filtered, sort_order)
    return DerivedView(
        records=tuple(ordered),
        search_term=term,
        sort_order=sort_order,
        total_count=len(records),
        filtered_count=len(filtered),
        no_results=bool(term) and not filtered and len(records) > 0,
    )
