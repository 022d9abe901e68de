"""
CLI entry point for minigrep.

This module serves as the entry point when minigrep.cli is executed as a module
with `python -m minigrep.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
