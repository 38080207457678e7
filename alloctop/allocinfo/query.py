"""Queries over the flat list of allocation records

The flat view is obtained as a composition of filtering by the minimal size, sorting by the
requested key and finally truncating to the requested number of lines. The order matters:
truncating before the sort would not yield the top records.
"""
from __future__ import annotations

# Standard Imports
from typing import Callable, Iterable, Optional, Any

# Third-Party Imports

# Alloctop Imports
from alloctop.allocinfo.structs import AllocationRecord, SortBy


# Sort key and whether the order is descending
SORT_KEYS: dict[SortBy, tuple[Callable[[AllocationRecord], Any], bool]] = {
    SortBy.Size: (lambda record: record.size, True),
    SortBy.Calls: (lambda record: record.calls, True),
    SortBy.Tag: (lambda record: record.tag, False),
}


def filter_by_min_size(
    records: Iterable[AllocationRecord], min_size: int
) -> list[AllocationRecord]:
    """Keeps only the records with size at least @p min_size

    :param iterable records: list of records
    :param int min_size: minimal size of the kept record
    :return: filtered list of records, in the original order
    """
    return [record for record in records if record.size >= min_size]


def sort_records(records: Iterable[AllocationRecord], sort_by: SortBy) -> list[AllocationRecord]:
    """Sorts the records by the given key

    Sizes and calls are sorted in descending order, tags in ascending lexicographic order.
    The sort is stable, so records with equal keys keep their original order.

    :param iterable records: list of records
    :param SortBy sort_by: key by which the records are sorted
    :return: new sorted list of records
    """
    key, descending = SORT_KEYS[sort_by]
    return sorted(records, key=key, reverse=descending)


def limit_records(
    records: list[AllocationRecord], max_lines: Optional[int]
) -> list[AllocationRecord]:
    """Truncates the records to at most @p max_lines

    :param list records: list of records
    :param int max_lines: maximal number of records, None for no limit
    :return: truncated list of records
    """
    return records if max_lines is None else records[:max_lines]


def select_records(
    records: Iterable[AllocationRecord],
    min_size: int = 0,
    sort_by: Optional[SortBy] = None,
    max_lines: Optional[int] = None,
) -> list[AllocationRecord]:
    """Selects the records for the flat view: filters, sorts and truncates them

    :param iterable records: parsed and unfiltered records of the report
    :param int min_size: minimal size of the displayed record
    :param SortBy sort_by: key used for sorting, if None the original order is kept
    :param int max_lines: maximal number of displayed records, None for no limit
    :return: list of records, that will be displayed
    """
    selected = filter_by_min_size(records, min_size)
    if sort_by is not None:
        selected = sort_records(selected, sort_by)
    return limit_records(selected, max_lines)
