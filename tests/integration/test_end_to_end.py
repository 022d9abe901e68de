"""
End-to-end tests: configuration through search, truncation and statistics.

Each test writes a real document to disk and drives the public package API the
way a library caller would.
"""

from __future__ import annotations

import pytest

from minigrep import (
    Config,
    DocumentNotFoundError,
    SearchMode,
    SearchStrategy,
    analyze,
    strategy_for,
)
from minigrep.core.types import OutputFormat
from minigrep.utils.formatter import format_result

pytestmark = pytest.mark.integration


class TestScenarios:
    def test_case_sensitive_search(self, write_document, engine):
        path = write_document("\nRust:\nsafe, fast, productive.\nPick three.\nDuct tape.")
        results = engine.run(Config(query="duct", document_path=str(path)))
        assert [(r.line, r.line_number, r.match_positions) for r in results] == [
            ("safe, fast, productive.", 3, ((15, 19),))
        ]

    def test_case_insensitive_from_environment(self, write_document, engine):
        path = write_document("\nRust:\nsafe, fast, productive.\nPick three.\nTrust me.")
        config = Config.from_env("rUsT", str(path), environ={"IGNORE_CASE": "1"})
        results = engine.run(config)
        assert [r.line for r in results] == ["Rust:", "Trust me."]
        assert [r.line_number for r in results] == [2, 5]

    def test_multiple_positions_on_one_line(self, write_document, engine):
        path = write_document("the quick brown fox jumps over the lazy dog")
        (result,) = engine.run(Config(query="the", document_path=str(path)))
        assert result.match_positions == ((0, 3), (31, 34))

    def test_empty_document_stats(self, write_document, engine):
        path = write_document("")
        results = engine.run(Config(query="anything", document_path=str(path)))
        assert results == []
        stats = engine.analyze(engine.last_contents or "", results)
        assert stats.total_lines == 0
        assert stats.matched_lines == 0
        assert stats.total_matches == 0

    def test_truncation(self, write_document, engine):
        path = write_document("Line 1 with Rust\nLine 2 with Rust\nLine 3 with Rust")
        results = engine.run(Config(query="Rust", document_path=str(path), max_results=1))
        assert len(results) == 1
        assert results[0].line_number == 1

    def test_prefix_wildcard(self, write_document, engine):
        path = write_document("Hello\nWorld\nHelp")
        config = Config(query="Hel*", document_path=str(path), mode=SearchMode.prefix_wildcard("Hel*"))
        assert strategy_for(config.mode) is SearchStrategy.PREFIX_WILDCARD
        results = engine.run(config)
        assert [(r.line, r.line_number, r.match_positions) for r in results] == [
            ("Hello", 1, ((0, 3),)),
            ("Help", 3, ((0, 3),)),
        ]


class TestWorkflow:
    def test_search_then_analyze_then_render(self, article_file, engine, test_helper):
        config = test_helper.config("rust", article_file, mode=SearchMode.case_insensitive())
        results = engine.run(config)
        test_helper.assert_valid_results(results)

        stats = analyze(engine.last_contents or "", results)
        assert stats.total_lines == 4
        assert stats.matched_lines == 2
        assert stats.most_common_words(2) == [("hello", 2), ("rust", 2)]

        rendered = format_result(results, OutputFormat.TEXT, show_line_numbers=True, stats=stats)
        assert rendered.splitlines()[0] == "[1] 2: Rust is great"
        assert "match rate: 50.0%" in rendered

    def test_insensitive_finds_at_least_as_many(self, poem_file, engine):
        sensitive = engine.run(Config(query="duct", document_path=str(poem_file)))
        insensitive = engine.run(
            Config(query="duct", document_path=str(poem_file), mode=SearchMode.case_insensitive())
        )
        assert len(insensitive) >= len(sensitive)
        assert engine.search_count == 2

    def test_missing_document(self, tmp_path, engine):
        with pytest.raises(DocumentNotFoundError, match="nonexistent_file.txt"):
            engine.run(Config(query="q", document_path=str(tmp_path / "nonexistent_file.txt")))
