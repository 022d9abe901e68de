"""
Output formatting module for minigrep.

This module renders search results and document statistics as plain text,
JSON, or highlighted console output. It is used by the CLI but has no CLI
dependency, so library callers can render results the same way.

Key Functions:
    format_result: Main entry point for formatting results in any supported format
    to_json_bytes: Fast JSON serialization using orjson
    format_text: Plain text with optional line numbers and span markers
    format_stats: Plain text statistics report
    render_highlight_console: Rich console output with highlighted match spans

Example:
    >>> from minigrep.utils.formatter import format_result
    >>> from minigrep.core.types import OutputFormat
    >>>
    >>> print(format_result(results, OutputFormat.TEXT, show_line_numbers=True))
    [1] 3: safe, fast, productive.
        positions: 15:19
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import orjson
from rich.console import Console
from rich.text import Text

from ..core.types import OutputFormat, SearchResult, SearchStats
from .utils import highlight_spans

DEFAULT_TOP_WORDS = 5


def _result_payload(result: SearchResult) -> dict:
    return {
        "line": result.line,
        "line_number": result.line_number,
        "match_positions": [[a, b] for a, b in result.match_positions],
    }


def _stats_payload(stats: SearchStats, top_words: int) -> dict:
    return {
        "total_lines": stats.total_lines,
        "matched_lines": stats.matched_lines,
        "total_matches": stats.total_matches,
        "match_rate": round(stats.match_rate, 2),
        "most_common_words": [[w, c] for w, c in stats.most_common_words(top_words)],
    }


def to_json_bytes(
    results: Sequence[SearchResult],
    stats: SearchStats | None = None,
    top_words: int = DEFAULT_TOP_WORDS,
) -> bytes:
    """
    Serialize results (and optionally statistics) to indented JSON bytes.

    Args:
        results: Search results in document order
        stats: Statistics to include under ``"stats"``; omitted when None
        top_words: How many frequent words to include with the statistics

    Returns:
        UTF-8 encoded JSON document
    """
    payload: dict = {"results": [_result_payload(r) for r in results]}
    if stats is not None:
        payload["stats"] = _stats_payload(stats, top_words)
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_text(
    results: Sequence[SearchResult],
    show_line_numbers: bool = False,
    highlight: bool = False,
) -> str:
    """
    Format results as numbered plain-text entries.

    Each entry is ``[k] <line>`` (``[k] <n>: <line>`` with line numbers),
    followed by an indented list of ``start:end`` match positions. With
    ``highlight`` the matched spans are wrapped in ``[[``/``]]``.
    """
    out: list[str] = []
    for index, result in enumerate(results, start=1):
        line = result.line
        if highlight:
            line = highlight_spans(
                line, list(result.match_positions), marker_left="[[", marker_right="]]"
            )
        prefix = f"{result.line_number}: " if show_line_numbers else ""
        out.append(f"[{index}] {prefix}{line}")
        positions = " ".join(f"{a}:{b}" for a, b in result.match_positions)
        out.append(f"    positions: {positions}")
    return "\n".join(out)


def format_stats(stats: SearchStats, top_words: int = DEFAULT_TOP_WORDS) -> str:
    out = [
        "Search statistics:",
        f"  total lines: {stats.total_lines}",
        f"  matched lines: {stats.matched_lines}",
        f"  total matches: {stats.total_matches}",
        f"  match rate: {stats.match_rate:.1f}%",
    ]
    common = stats.most_common_words(top_words)
    if common:
        out.append("  most common words:")
        for word, count in common:
            out.append(f"    {word}: {count}")
    return "\n".join(out)


def render_highlight_console(
    results: Sequence[SearchResult],
    show_line_numbers: bool = False,
    console: Console | None = None,
) -> None:
    """Render results with rich, styling each match span."""
    if console is None:
        console = Console()
    for index, result in enumerate(results, start=1):
        text = Text(f"[{index}] ", style="dim")
        if show_line_numbers:
            text.append(f"{result.line_number}: ", style="cyan")
        offset = len(text)
        text.append(result.line)
        for a, b in result.match_positions:
            text.stylize("bold red", offset + a, offset + b)
        console.print(text)


def format_result(
    results: Sequence[SearchResult],
    fmt: OutputFormat,
    show_line_numbers: bool = False,
    stats: SearchStats | None = None,
    top_words: int = DEFAULT_TOP_WORDS,
) -> str:
    """Format search results according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(results, stats, top_words).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(results, show_line_numbers)
        text = ""
    else:
        text = format_text(results, show_line_numbers, highlight=fmt == OutputFormat.HIGHLIGHT)
    if stats is not None:
        text = f"{text}\n{format_stats(stats, top_words)}" if text else format_stats(stats, top_words)
    return text
