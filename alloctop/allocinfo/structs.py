"""List of structures used for representing the parsed and aggregated allocation report"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass
from enum import Enum

# Third-Party Imports

# Alloctop Imports
from alloctop.utils.exceptions import InvalidParameterException


@dataclass(frozen=True)
class AllocationRecord:
    """Single data line of the allocation report

    :ivar int size: amount of memory (in bytes) currently attributed to the tag
    :ivar int calls: number of allocations made at the tag
    :ivar str tag: slash-separated path of the allocating call site, e.g. ``mm/slub.c:123 func``
    """

    __slots__ = ["size", "calls", "tag"]

    size: int
    calls: int
    tag: str


@dataclass
class GlobalSummary:
    """Totals of sizes and calls over the whole report"""

    __slots__ = ["size", "calls"]

    size: int
    calls: int


@dataclass
class TreeEntry:
    """Accumulated sizes and calls of all records sharing one tag prefix"""

    __slots__ = ["size", "calls"]

    size: int
    calls: int


class SortBy(Enum):
    """Keys by which the flat listing of records can be sorted"""

    Size = "s"
    Calls = "c"
    Tag = "t"

    @staticmethod
    def supported() -> list[str]:
        """Returns list of short keys, that can be passed from the command line

        :return: list of supported sort keys
        """
        return [key.value for key in SortBy]

    @staticmethod
    def from_key(key: str) -> SortBy:
        """Converts the short key from the command line into the sort key

        :param key: one of the 's', 'c' or 't'
        :raises InvalidParameterException: when the key is not supported
        :return: corresponding sort key
        """
        for sort_by in SortBy:
            if sort_by.value == key:
                return sort_by
        raise InvalidParameterException(
            "sort", key, f"(choose from {', '.join(SortBy.supported())})"
        )
