"""
Core functionality for the minigrep package.

- Main engine class and the ``run`` entry point
- Configuration and its validation
- Core data types (search modes, results, statistics)
"""

from .api import MiniGrep, run
from .config import Config
from .types import (
    MatchSpan,
    OutputFormat,
    SearchMode,
    SearchModeKind,
    SearchResult,
    SearchStats,
)

__all__ = [
    # Main classes
    "MiniGrep",
    "Config",
    "run",
    # Data types
    "MatchSpan",
    "OutputFormat",
    "SearchMode",
    "SearchModeKind",
    "SearchResult",
    "SearchStats",
]
