"""
Matching algorithms and document statistics.

- Literal substring matching within a line
- The closed set of search strategies and their dispatch
- Line/match counters and word-frequency ranking
"""

from .matchers import find_all_matches
from .stats import analyze
from .strategies import (
    SearchStrategy,
    search_case_insensitive,
    search_case_sensitive,
    search_exact,
    search_prefix_wildcard,
    strategy_for,
)

__all__ = [
    # Pattern matching
    "find_all_matches",
    # Strategies
    "SearchStrategy",
    "strategy_for",
    "search_case_sensitive",
    "search_case_insensitive",
    "search_exact",
    "search_prefix_wildcard",
    # Statistics
    "analyze",
]
