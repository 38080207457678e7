"""This module provides methods for parsing the raw allocation report

The report is line oriented, where each data line has the following format::

    <size> <calls> <tag>

The ``<size>`` is number of bytes attributed to the tag, ``<calls>`` is the number of allocations
and ``<tag>`` identifies the call site (usually in form ``module/file.c:line [module] func``).
The header of the report consists of the version line and the commented column names.
"""
from __future__ import annotations

# Standard Imports
from typing import Iterable, Optional
import re

# Third-Party Imports

# Alloctop Imports
from alloctop.allocinfo.structs import AllocationRecord
from alloctop.utils import log
from alloctop.utils.exceptions import AllocInfoReadException


ALLOCINFO_PATH: str = "/proc/allocinfo"
COMMENT_MARK: str = "#"
MIN_FIELD_COUNT: int = 3
PATTERN_UNSIGNED: re.Pattern[str] = re.compile(r"\+?[0-9]+")


def parse_counter(field: str) -> int:
    """Parses the size or calls field of the record

    Malformed counters are treated as zero, so the rest of the line (mainly the tag) is not lost.

    :param str field: raw field of the line
    :return: parsed non-negative number or 0
    """
    return int(field) if PATTERN_UNSIGNED.fullmatch(field) else 0


def parse_line(line: str) -> Optional[AllocationRecord]:
    """Parses single line of the allocation report

    Lines with less than three fields and commented lines are not records.

    :param str line: raw line of the report
    :return: parsed record or None if the line does not contain the record
    """
    fields = line.split()
    if len(fields) < MIN_FIELD_COUNT or fields[0] == COMMENT_MARK:
        return None

    # The tag might contain whitespaces as well, so we join the rest of the line
    return AllocationRecord(
        size=parse_counter(fields[0]),
        calls=parse_counter(fields[1]),
        tag=" ".join(fields[2:]),
    )


def parse_allocinfo_lines(lines: Iterable[str]) -> list[AllocationRecord]:
    """Parses the lines of the allocation report into the list of records

    Note that nothing is filtered by the size at this point, since skipping the lines during
    the parsing would corrupt the totals of the aggregated data (e.g. for the tree view).

    :param iterable lines: raw lines of the report
    :return: list of parsed records in the order of the report
    """
    records = []
    for line in lines:
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records


def parse_allocinfo(filename: str = ALLOCINFO_PATH) -> list[AllocationRecord]:
    """Reads the whole allocation report and parses it into the list of records

    :param str filename: path to the allocation report
    :raises AllocInfoReadException: when the report cannot be opened or read
    :return: list of parsed records in the order of the report
    """
    try:
        with open(filename, "r", encoding="utf-8") as allocinfo_handle:
            lines = allocinfo_handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise AllocInfoReadException(filename, str(exc)) from exc

    records = parse_allocinfo_lines(lines)
    log.debug(f"parsed {len(records)} records from {len(lines)} lines of '{filename}'")
    return records
