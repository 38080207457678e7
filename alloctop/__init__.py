"""Alloctop is a small diagnostic tool for the kernel allocation accounting report

The kernel (when built with memory allocation profiling) exposes the report in
``/proc/allocinfo``. Each line of the report attributes certain amount of allocated memory and
number of allocation calls to a tag, i.e. the call site in form of ``module/file.c:line func``.

Alloctop reads the report once, sums the global totals and either lists the individual records
(filtered, sorted and truncated) or aggregates them by the slash-separated components of their
tags into a tree-like view.
"""
from __future__ import annotations

__version__ = "0.1.0"
