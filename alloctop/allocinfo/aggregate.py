"""Aggregations of the parsed allocation records

Two aggregations are supported: the global one, which sums all the records into single total,
and the tree one, which sums the records by every prefix of their tags. E.g. record with tag
``mm/slub.c:123 func`` contributes to the prefix ``mm`` as well as ``mm/slub.c:123 func``.

Both of the aggregations have to run over the unfiltered records, otherwise the totals of the
ancestor prefixes would not correspond to the sum of their descendants.
"""
from __future__ import annotations

# Standard Imports
from typing import Iterable
import collections

# Third-Party Imports

# Alloctop Imports
from alloctop.allocinfo.structs import AllocationRecord, GlobalSummary, TreeEntry


TAG_SEPARATOR: str = "/"


def aggregate_global(records: Iterable[AllocationRecord]) -> GlobalSummary:
    """Sums sizes and calls of all the records

    :param iterable records: parsed records of the report
    :return: total size and calls of the report
    """
    summary = GlobalSummary(size=0, calls=0)
    for record in records:
        summary.size += record.size
        summary.calls += record.calls
    return summary


def tag_prefixes(tag: str) -> list[str]:
    """Returns all the prefixes of the tag, aligned to the separator, from the shortest one

    :param str tag: tag of the record
    :return: list of prefixes, including the tag itself
    """
    parts = tag.split(TAG_SEPARATOR)
    return [TAG_SEPARATOR.join(parts[: i + 1]) for i in range(len(parts))]


def aggregate_tree(records: Iterable[AllocationRecord]) -> dict[str, TreeEntry]:
    """Aggregates the sizes and calls of the records by the prefixes of their tags

    Each record is counted in every prefix of its tag, i.e. the prefix accumulates all of its
    descendants and the records tagged exactly by the prefix.

    :param iterable records: parsed and unfiltered records of the report
    :return: mapping of tag prefixes to the accumulated sizes and calls
    """
    aggregated: dict[str, TreeEntry] = collections.defaultdict(lambda: TreeEntry(size=0, calls=0))
    for record in records:
        for prefix in tag_prefixes(record.tag):
            entry = aggregated[prefix]
            entry.size += record.size
            entry.calls += record.calls
    return dict(aggregated)


def sorted_tree_entries(
    aggregated: dict[str, TreeEntry], min_size: int = 0
) -> list[tuple[str, TreeEntry]]:
    """Sorts the aggregated entries by their prefixes and drops those that are too small

    :param dict aggregated: mapping of tag prefixes to accumulated sizes and calls
    :param int min_size: entries with accumulated size lesser than this are omitted
    :return: list of (prefix, entry) pairs sorted lexicographically by the prefix
    """
    return [
        (prefix, entry)
        for prefix, entry in sorted(aggregated.items(), key=lambda item: item[0])
        if entry.size >= min_size
    ]
