"""
Search strategies.

Each strategy turns ``(query, document_text)`` into an ordered list of
``SearchResult``, one per matching line, in document order. The set is closed:
``SearchStrategy`` enumerates every strategy and ``strategy_for`` picks exactly
one for a ``SearchMode``. Strategies never combine and never fall back to one
another within a run.

Strategies:
    CASE_SENSITIVE: literal substring search
    CASE_INSENSITIVE: literal substring search after lowercasing both sides
    EXACT: the whitespace-trimmed line must equal the query
    PREFIX_WILDCARD: ``<prefix>*`` selects lines starting with ``<prefix>``

PREFIX_WILDCARD stands in for pattern search but is NOT a regular expression
engine: only a trailing ``*`` is understood, and a query without one is
searched as plain case-sensitive text.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ..core.types import MatchSpan, SearchMode, SearchModeKind, SearchResult
from ..utils.utils import fold_case, split_lines
from .matchers import find_all_matches

WILDCARD = "*"


def _collect(
    contents: str, match_line: Callable[[str], list[MatchSpan]]
) -> list[SearchResult]:
    results: list[SearchResult] = []
    for index, line in enumerate(split_lines(contents), start=1):
        spans = match_line(line)
        if spans:
            results.append(SearchResult(line=line, line_number=index, match_positions=tuple(spans)))
    return results


def search_case_sensitive(query: str, contents: str) -> list[SearchResult]:
    return _collect(contents, lambda line: find_all_matches(line, query, case_sensitive=True))


def search_case_insensitive(query: str, contents: str) -> list[SearchResult]:
    folded_query = fold_case(query)
    return _collect(
        contents,
        lambda line: find_all_matches(fold_case(line), folded_query, case_sensitive=False),
    )


def search_exact(query: str, contents: str) -> list[SearchResult]:
    """Lines equal to ``query`` once surrounding whitespace is trimmed."""
    if not query:
        return []
    return _collect(contents, lambda line: [(0, len(line))] if line.strip() == query else [])


def search_prefix_wildcard(query: str, contents: str) -> list[SearchResult]:
    """
    Lines starting with the text before a trailing ``*``.

    The span covers the prefix. A bare ``*`` selects every non-empty line with a
    span over the whole line. Without a trailing ``*`` this is
    ``search_case_sensitive``.
    """
    if not query.endswith(WILDCARD):
        return search_case_sensitive(query, contents)

    prefix = query.rstrip(WILDCARD)
    if not prefix:
        return _collect(contents, lambda line: [(0, len(line))] if line else [])
    return _collect(contents, lambda line: [(0, len(prefix))] if line.startswith(prefix) else [])


class SearchStrategy(str, Enum):
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"
    EXACT = "exact"
    PREFIX_WILDCARD = "prefix_wildcard"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def search(self, query: str, contents: str) -> list[SearchResult]:
        return _IMPLEMENTATIONS[self](query, contents)


_IMPLEMENTATIONS: dict[SearchStrategy, Callable[[str, str], list[SearchResult]]] = {
    SearchStrategy.CASE_SENSITIVE: search_case_sensitive,
    SearchStrategy.CASE_INSENSITIVE: search_case_insensitive,
    SearchStrategy.EXACT: search_exact,
    SearchStrategy.PREFIX_WILDCARD: search_prefix_wildcard,
}

_DISPLAY_NAMES: dict[SearchStrategy, str] = {
    SearchStrategy.CASE_SENSITIVE: "case-sensitive search",
    SearchStrategy.CASE_INSENSITIVE: "case-insensitive search",
    SearchStrategy.EXACT: "exact line match",
    SearchStrategy.PREFIX_WILDCARD: "prefix wildcard search",
}

_BY_MODE: dict[SearchModeKind, SearchStrategy] = {
    SearchModeKind.CASE_SENSITIVE: SearchStrategy.CASE_SENSITIVE,
    SearchModeKind.CASE_INSENSITIVE: SearchStrategy.CASE_INSENSITIVE,
    SearchModeKind.EXACT: SearchStrategy.EXACT,
    SearchModeKind.PREFIX_WILDCARD: SearchStrategy.PREFIX_WILDCARD,
}


def strategy_for(mode: SearchMode) -> SearchStrategy:
    """Return the single strategy a search mode selects."""
    return _BY_MODE[mode.kind]
