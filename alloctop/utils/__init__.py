"""Utils contains helper modules, that are not directly dependent on the allocation report.

Currently, this consists of the logging helpers and the collection of exceptions.
"""
