"""
Search engine entry point.

``MiniGrep`` orchestrates one search run: it validates a ``Config``, loads the
document through a reader, dispatches to the strategy the config selects, and
applies the result cap. The module-level ``run`` does the same with a fresh
engine for callers that do not need the session counter.

Example:
    >>> from minigrep import Config, MiniGrep, SearchMode
    >>>
    >>> engine = MiniGrep()
    >>> config = Config(query="Rust", document_path="poem.txt")
    >>> results = engine.run(config)
    >>> for result in results:
    ...     print(result.format_output(show_line_numbers=True))
    >>> stats = engine.analyze(engine.last_contents or "", results)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from pathlib import Path

from ..search.stats import analyze
from ..search.strategies import strategy_for
from ..utils.error_handling import classify_read_error
from ..utils.logging_config import SearchLogger, get_logger
from ..utils.utils import read_document
from .config import Config
from .types import SearchResult, SearchStats

DocumentReader = Callable[[Path], str]


class MiniGrep:
    """
    Search engine for a single in-memory document.

    Attributes:
        logger (SearchLogger): Logging interface
        reader (DocumentReader): Loads a document path into one string
        search_count (int): Number of successful runs on this engine
        last_contents (str | None): Text of the document read by the last
            successful run, for callers that want statistics afterwards
    """

    def __init__(
        self,
        logger: SearchLogger | None = None,
        reader: DocumentReader | None = None,
    ) -> None:
        self.logger = logger or get_logger()
        self.reader: DocumentReader = reader or read_document
        self.search_count = 0
        self.last_contents: str | None = None

    def load(self, config: Config) -> str:
        """Validate ``config`` and read its document.

        Raises:
            ConfigurationError: If the query, path or result cap is invalid.
            DocumentNotFoundError: If the document does not exist.
            DocumentUnreadableError: If the document cannot be read or decoded.
        """
        config.validate()
        try:
            return self.reader(config.path)
        except (OSError, UnicodeError) as exc:
            error = classify_read_error(config.path, exc)
            self.logger.log_document_error(config.document_path, error.message)
            raise error from exc

    def search_text(self, config: Config, contents: str) -> list[SearchResult]:
        """Run the configured strategy over already-loaded text and apply the cap."""
        strategy = strategy_for(config.mode)
        results = strategy.search(config.mode.effective_query(config.query), contents)

        if config.max_results is not None and len(results) > config.max_results:
            self.logger.log_truncation(len(results), config.max_results)
            results = results[: config.max_results]
        return results

    def run(self, config: Config) -> list[SearchResult]:
        """
        Execute one search run.

        Args:
            config: What to search for, where, and how

        Returns:
            Matching lines in document order, at most ``config.max_results`` of
            them. An empty list means nothing matched; it is not an error.

        Raises:
            SearchError: Any configuration or document failure, unretried.
        """
        strategy = strategy_for(config.mode)
        self.logger.log_search_start(
            query=config.query,
            document_path=config.document_path,
            mode=strategy.display_name,
        )
        t0 = time.perf_counter()

        contents = self.load(config)
        results = self.search_text(config, contents)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.search_count += 1
        self.last_contents = contents
        self.logger.log_search_complete(
            query=config.query,
            results_count=len(results),
            elapsed_ms=elapsed_ms,
        )
        return results

    def analyze(self, contents: str, results: Sequence[SearchResult]) -> SearchStats:
        return analyze(contents, results)


def run(config: Config) -> list[SearchResult]:
    """Run a single search with a fresh engine."""
    return MiniGrep().run(config)
