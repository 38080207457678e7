"""Textual outputs of the processed allocation report."""
