"""
Substring matching within a single line.

``find_all_matches`` is the building block every search strategy uses: it
reports each occurrence of a literal pattern as a half-open ``(start, end)``
character span. Occurrences may overlap, because the scan resumes one character
after the previous match start rather than after its end.

Example:
    >>> from minigrep.search.matchers import find_all_matches
    >>> find_all_matches("hello world hello rust", "hello", case_sensitive=True)
    [(0, 5), (12, 17)]
    >>> find_all_matches("aaa", "aa", case_sensitive=True)
    [(0, 2), (1, 3)]
"""

from __future__ import annotations

from ..core.types import MatchSpan
from ..utils.utils import fold_case


def find_all_matches(text: str, pattern: str, case_sensitive: bool = True) -> list[MatchSpan]:
    """
    Locate every occurrence of ``pattern`` in ``text``.

    Args:
        text: The line to scan
        pattern: Literal text to look for; an empty pattern matches nothing
        case_sensitive: When False both sides are lowercased before comparing

    Returns:
        Spans in ascending start order. Offsets index the lowercased text when
        ``case_sensitive`` is False; lowercasing preserves length, so they are
        valid for the original text as well.
    """
    matches: list[MatchSpan] = []
    if not pattern:
        return matches

    if not case_sensitive:
        text = fold_case(text)
        pattern = fold_case(pattern)

    width = len(pattern)
    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            break
        matches.append((pos, pos + width))
        start = pos + 1
    return matches
