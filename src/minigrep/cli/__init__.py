"""
Command-line interface for minigrep.

The CLI turns arguments and the ``IGNORE_CASE`` environment flag into a
``Config``, runs the engine, and prints results and statistics.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
