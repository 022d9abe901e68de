"""
Core data types for minigrep.

Key Types:
    OutputFormat: Enumeration of supported output formats
    SearchModeKind: The closed set of search modes
    SearchMode: A search mode plus the data some modes carry
    SearchResult: One matching line with its match positions
    SearchStats: Aggregate counters and word frequencies for a document

Positions are half-open ``(start, end)`` pairs of character (code point)
offsets into ``SearchResult.line``; they are never UTF-8 byte offsets.

Example:
    >>> from minigrep.core.types import SearchMode, SearchResult
    >>>
    >>> mode = SearchMode.prefix_wildcard("Hel*")
    >>> result = SearchResult(line="Hello", line_number=1, match_positions=((0, 3),))
    >>> result.format_output(show_line_numbers=True)
    '1: Hello'
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

# (start, end), half-open character offsets within a line
MatchSpan = tuple[int, int]

IGNORE_CASE_ENV = "IGNORE_CASE"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class SearchModeKind(str, Enum):
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"
    EXACT = "exact"
    PREFIX_WILDCARD = "prefix_wildcard"


@dataclass(frozen=True, slots=True)
class SearchMode:
    """
    Which matching algorithm a run uses.

    ``pattern`` is only meaningful for ``PREFIX_WILDCARD``, where it holds the
    ``<prefix>*`` query. Build instances through the classmethods rather than
    the constructor.
    """

    kind: SearchModeKind = SearchModeKind.CASE_SENSITIVE
    pattern: str | None = None

    @classmethod
    def case_sensitive(cls) -> SearchMode:
        return cls(SearchModeKind.CASE_SENSITIVE)

    @classmethod
    def case_insensitive(cls) -> SearchMode:
        return cls(SearchModeKind.CASE_INSENSITIVE)

    @classmethod
    def exact(cls) -> SearchMode:
        return cls(SearchModeKind.EXACT)

    @classmethod
    def prefix_wildcard(cls, pattern: str | None = None) -> SearchMode:
        return cls(SearchModeKind.PREFIX_WILDCARD, pattern)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SearchMode:
        """Case-insensitive when ``IGNORE_CASE`` is set to a non-empty value."""
        env = os.environ if environ is None else environ
        if env.get(IGNORE_CASE_ENV):
            return cls.case_insensitive()
        return cls.case_sensitive()

    @property
    def is_case_sensitive(self) -> bool:
        return self.kind in (SearchModeKind.CASE_SENSITIVE, SearchModeKind.EXACT)

    def effective_query(self, query: str) -> str:
        """The text handed to the strategy: the wildcard pattern if one was given."""
        if self.kind == SearchModeKind.PREFIX_WILDCARD and self.pattern:
            return self.pattern
        return query

    def __str__(self) -> str:
        if self.kind == SearchModeKind.PREFIX_WILDCARD and self.pattern:
            return f"{self.kind.value}({self.pattern})"
        return self.kind.value


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    A single matching line.

    Attributes:
        line: Full text of the matching line, original casing preserved
        line_number: 1-based line number within the document
        match_positions: Ascending ``(start, end)`` character spans; never empty
    """

    line: str
    line_number: int
    match_positions: tuple[MatchSpan, ...]

    def format_output(self, show_line_numbers: bool = False) -> str:
        if show_line_numbers:
            return f"{self.line_number}: {self.line}"
        return self.line


@dataclass(slots=True)
class SearchStats:
    """
    Aggregate statistics for one document and the results found in it.

    Attributes:
        total_lines: Number of lines in the document (0 for an empty document)
        matched_lines: Number of search results
        total_matches: Sum of match positions across all results
        word_frequency: Lowercased word -> occurrences in the whole document
    """

    total_lines: int = 0
    matched_lines: int = 0
    total_matches: int = 0
    word_frequency: dict[str, int] = field(default_factory=dict)

    @property
    def match_rate(self) -> float:
        """Percentage of lines that matched."""
        if self.total_lines == 0:
            return 0.0
        return self.matched_lines / self.total_lines * 100.0

    def most_common_words(self, n: int) -> list[tuple[str, int]]:
        """Top ``n`` words by count; equal counts are ordered alphabetically."""
        if n <= 0:
            return []
        ranked = sorted(self.word_frequency.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:n]
