"""Shared fixtures for the testing of functionality of Alloctop."""
from __future__ import annotations

# Standard Imports
import os

# Third-Party Imports
import pytest

# Alloctop Imports
from alloctop.allocinfo.structs import AllocationRecord
from alloctop.utils import log


SAMPLES_DIR = os.path.join(os.path.split(__file__)[0], "allocinfo_samples")


@pytest.fixture(scope="session")
def allocinfo_basic():
    """
    Returns:
        str: path to the report with the header and several records from mm, fs and kernel
    """
    return os.path.join(SAMPLES_DIR, "allocinfo_basic")


@pytest.fixture(scope="session")
def allocinfo_malformed():
    """
    Returns:
        str: path to the report with comments, short lines and malformed counters
    """
    return os.path.join(SAMPLES_DIR, "allocinfo_malformed")


@pytest.fixture(scope="function")
def write_allocinfo(tmp_path):
    """Returns function, that writes the given lines as the report into temporary directory"""

    def writer(lines, name="allocinfo"):
        report_path = tmp_path / name
        report_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(report_path)

    return writer


@pytest.fixture(scope="function")
def sized_records():
    """
    Returns:
        list: records of sizes 5, 50, 20 and 10 in this order
    """
    return [
        AllocationRecord(size=5, calls=4, tag="a/x"),
        AllocationRecord(size=50, calls=1, tag="b/y"),
        AllocationRecord(size=20, calls=3, tag="a/z"),
        AllocationRecord(size=10, calls=2, tag="c"),
    ]


@pytest.fixture(autouse=True)
def setup():
    """Resets the global switches of the log before each test"""
    log.VERBOSITY = 0
    log.COLOR_OUTPUT = False
    log.SUPPRESS_WARNINGS = False
    yield
