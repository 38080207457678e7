"""Parsing and processing of the kernel allocation accounting report (``/proc/allocinfo``).

The report is read once into a list of :class:`AllocationRecord`, which is then either
aggregated into the tree view or filtered, sorted and truncated into the flat view.
"""
