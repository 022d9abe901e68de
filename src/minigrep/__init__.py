"""
minigrep: line-oriented text search over a single in-memory document.

Key Features:
    - **Four Search Modes**: case-sensitive, case-insensitive, exact line, and
      prefix wildcard (``<prefix>*``, not a regular expression engine)
    - **Every Occurrence**: each result lists all match positions in its line,
      including overlapping ones, as character offsets
    - **Result Cap**: keep only the first N matching lines
    - **Document Statistics**: line and match counts plus word frequencies
    - **Output Formats**: plain text, JSON, highlighted console output

Main Classes:
    MiniGrep: Search engine that validates, reads, dispatches and truncates
    Config: Immutable input to a search run
    SearchMode: Which matching algorithm to use
    SearchResult: One matching line and its match positions
    SearchStats: Aggregate statistics for a document

Example Usage:
    >>> from minigrep import Config, MiniGrep, SearchMode
    >>> engine = MiniGrep()
    >>> config = Config(query="rust", document_path="poem.txt",
    ...                 mode=SearchMode.case_insensitive(), max_results=10)
    >>> for result in engine.run(config):
    ...     print(result.format_output(show_line_numbers=True))

    CLI usage:
        $ minigrep search rust poem.txt -n --max 10
        $ IGNORE_CASE=1 minigrep search RUST poem.txt
        $ minigrep search "Hel*" greetings.txt --wildcard
"""

from .core.api import MiniGrep, run
from .core.config import Config
from .core.types import (
    MatchSpan,
    OutputFormat,
    SearchMode,
    SearchModeKind,
    SearchResult,
    SearchStats,
)
from .search import SearchStrategy, analyze, find_all_matches, strategy_for
from .utils.error_handling import (
    ConfigurationError,
    DocumentEncodingError,
    DocumentNotFoundError,
    DocumentPermissionError,
    DocumentUnreadableError,
    EmptyFilePathError,
    EmptyQueryError,
    InvalidMaxResultsError,
    SearchError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = "Line-oriented text search with match positions and document statistics"

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
    # Search
    "SearchStrategy",
    "strategy_for",
    "find_all_matches",
    "analyze",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "ConfigurationError",
    "EmptyQueryError",
    "EmptyFilePathError",
    "InvalidMaxResultsError",
    "DocumentNotFoundError",
    "DocumentUnreadableError",
    "DocumentPermissionError",
    "DocumentEncodingError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
