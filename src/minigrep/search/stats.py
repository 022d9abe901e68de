"""
Document statistics.

``analyze`` profiles the whole document (line count and word frequencies)
together with the results of one search. It never looks at the query, so the
word frequencies describe the document rather than the matches.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from ..core.types import SearchResult, SearchStats
from ..utils.utils import split_lines


def normalize_word(token: str) -> str:
    """Lowercase ``token`` and strip non-alphabetic characters from both ends."""
    token = token.lower()
    start = 0
    end = len(token)
    while start < end and not token[start].isalpha():
        start += 1
    while end > start and not token[end - 1].isalpha():
        end -= 1
    return token[start:end]


def iter_words(contents: str) -> Iterable[str]:
    for token in contents.split():
        word = normalize_word(token)
        if word:
            yield word


def analyze(contents: str, results: Sequence[SearchResult]) -> SearchStats:
    """
    Compute aggregate statistics for a document and the results found in it.

    Args:
        contents: Full document text
        results: Results of a search over ``contents``

    Returns:
        A fresh ``SearchStats``; calling this twice with the same inputs gives
        equal values.
    """
    return SearchStats(
        total_lines=len(split_lines(contents)),
        matched_lines=len(results),
        total_matches=sum(len(r.match_positions) for r in results),
        word_frequency=dict(Counter(iter_words(contents))),
    )
