""" This module implements the modifying output functions

The outputs are plain tables, where the numeric columns are right aligned, e.g.::

     Total Size : 1523712
    Total Calls : 2043

          Size      Calls Tag
         12288          3 mm/memory.c:1234 func:__pte_alloc
"""
from __future__ import annotations

# Standard Imports
from typing import Iterable

# Third-Party Imports

# Alloctop Imports
from alloctop.allocinfo.structs import AllocationRecord, GlobalSummary, TreeEntry
from alloctop.utils import log


LABEL_WIDTH: int = 11
COLUMN_WIDTH: int = 10


def get_pretty_global(summary: GlobalSummary) -> str:
    """Creates the output of the global totals

    :param GlobalSummary summary: totals of the report
    :returns string: two labeled lines followed by an empty line
    """
    output = f"{'Total Size':>{LABEL_WIDTH}} : {summary.size}\n"
    output += f"{'Total Calls':>{LABEL_WIDTH}} : {summary.calls}\n"
    return output


def get_pretty_row(size: int | str, calls: int | str, tag: str) -> str:
    """
    :param size: size column
    :param calls: calls column
    :param str tag: tag column
    :returns string: single row of the table
    """
    return f"{size:>{COLUMN_WIDTH}} {calls:>{COLUMN_WIDTH}} {tag}"


def get_pretty_header() -> str:
    """:returns string: header of the table"""
    return get_pretty_row("Size", "Calls", "Tag")


def get_pretty_records(records: Iterable[AllocationRecord]) -> str:
    """Creates the table of the flat view

    :param iterable records: records in the order they are displayed
    :returns string: header and one row per record
    """
    output = [get_pretty_header()]
    output.extend(get_pretty_row(record.size, record.calls, record.tag) for record in records)
    return "\n".join(output)


def get_pretty_tree(entries: Iterable[tuple[str, TreeEntry]]) -> str:
    """Creates the table of the tree view

    :param iterable entries: pairs of tag prefixes and aggregated entries
    :returns string: header and one row per prefix
    """
    output = [get_pretty_header()]
    output.extend(get_pretty_row(entry.size, entry.calls, prefix) for prefix, entry in entries)
    return "\n".join(output)


def print_global(summary: GlobalSummary) -> None:
    """Prints the global totals to the standard output"""
    log.write(get_pretty_global(summary))


def print_records(records: Iterable[AllocationRecord]) -> None:
    """Prints the flat view to the standard output"""
    log.write(get_pretty_records(records))


def print_tree(entries: Iterable[tuple[str, TreeEntry]]) -> None:
    """Prints the tree view to the standard output"""
    log.write(get_pretty_tree(entries))
