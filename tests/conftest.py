"""
Shared test fixtures and utilities for minigrep tests.

This module provides common documents, fixtures and helper functions used
across the unit and integration suites.
"""

from pathlib import Path

import pytest

from minigrep import Config, MiniGrep, SearchMode
from minigrep.utils.logging_config import configure_logging

# Test data constants
POEM = "\nRust:\nsafe, fast, productive.\nPick three.\nDuct tape."

TRUST_POEM = "\nRust:\nsafe, fast, productive.\nPick three.\nTrust me."

GREETINGS = "Hello\nWorld\nHelp"

ARTICLE = """Hello world
Rust is great
Programming with Rust
Hello again
"""


@pytest.fixture(autouse=True)
def quiet_logging():
    """Give every test a fresh global logger that writes nowhere."""
    configure_logging(enable_console=False)
    yield
    configure_logging(enable_console=False)


@pytest.fixture
def write_document(tmp_path: Path):
    """Write ``content`` to a file under ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "document.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def poem_file(write_document) -> Path:
    return write_document(POEM, "poem.txt")


@pytest.fixture
def article_file(write_document) -> Path:
    return write_document(ARTICLE, "article.txt")


@pytest.fixture
def engine() -> MiniGrep:
    return MiniGrep()


class TestDataHelper:
    """Helper class for creating configs and checking result invariants."""

    @staticmethod
    def config(query: str, path: Path | str, **kwargs) -> Config:
        defaults = {"mode": SearchMode.case_sensitive()}
        defaults.update(kwargs)
        return Config(query=query, document_path=str(path), **defaults)

    @staticmethod
    def assert_valid_results(results) -> None:
        """Every result has spans, spans are in range, starts strictly increase."""
        for result in results:
            assert result.match_positions, f"empty match positions for line {result.line_number}"
            previous = -1
            for start, end in result.match_positions:
                assert 0 <= start < end <= len(result.line)
                assert start > previous
                previous = start


@pytest.fixture
def test_helper():
    """Provide the TestDataHelper for tests."""
    return TestDataHelper()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
