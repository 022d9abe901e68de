"""
Configuration module for minigrep.

``Config`` is the immutable input to a search run. It is built once, by the
command line or directly by library callers, and only read afterwards.

Example:
    >>> from minigrep.core.config import Config
    >>> from minigrep.core.types import SearchMode
    >>>
    >>> config = Config(
    ...     query="rust",
    ...     document_path="poem.txt",
    ...     mode=SearchMode.from_env(),
    ...     show_line_numbers=True,
    ...     max_results=10,
    ... )
    >>> config.validate()
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..utils.error_handling import (
    DocumentNotFoundError,
    EmptyFilePathError,
    EmptyQueryError,
    InvalidMaxResultsError,
)
from .types import SearchMode


@dataclass(frozen=True, slots=True)
class Config:
    query: str
    document_path: str
    mode: SearchMode = field(default_factory=SearchMode.case_sensitive)
    show_line_numbers: bool = False
    # None = no limit
    max_results: int | None = None

    @classmethod
    def from_env(
        cls,
        query: str,
        document_path: str,
        environ: Mapping[str, str] | None = None,
        **kwargs: object,
    ) -> Config:
        """Build a config whose mode comes from the ``IGNORE_CASE`` environment flag."""
        return cls(
            query=query,
            document_path=document_path,
            mode=SearchMode.from_env(environ),
            **kwargs,  # type: ignore[arg-type]
        )

    @property
    def path(self) -> Path:
        return Path(self.document_path)

    def validate(self) -> None:
        """Check the config before any I/O happens.

        Raises:
            EmptyQueryError: If the query is an empty string.
            EmptyFilePathError: If the document path is empty.
            InvalidMaxResultsError: If the result cap is negative.
            DocumentNotFoundError: If the path is not an existing file.
        """
        if not self.query:
            raise EmptyQueryError()
        if not self.document_path:
            raise EmptyFilePathError()
        if self.max_results is not None and self.max_results < 0:
            raise InvalidMaxResultsError(self.max_results)
        if not self.path.is_file():
            raise DocumentNotFoundError(self.path)
