"""
Command-line interface for minigrep.

Main Commands:
    search: Search one document for a query
    stats: Profile a document (line count and most common words)

Example Usage:
    Basic search with line numbers:
        $ minigrep search Rust poem.txt -n

    Case-insensitive search, first five matching lines:
        $ IGNORE_CASE=1 minigrep search rust poem.txt --max 5

    Prefix wildcard and JSON output:
        $ minigrep search "Hel*" greetings.txt --wildcard --format json

Exit codes: 0 when at least one line matched, 1 when nothing matched or the
search failed.

For more information, run: minigrep search --help
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .. import __version__
from ..core.api import MiniGrep
from ..core.config import Config
from ..core.types import OutputFormat, SearchMode
from ..search.stats import analyze
from ..search.strategies import strategy_for
from ..utils.error_handling import SearchError, classify_read_error
from ..utils.formatter import DEFAULT_TOP_WORDS, format_result, format_stats, to_json_bytes
from ..utils.logging_config import LogFormat, LogLevel, configure_logging
from ..utils.utils import read_document


def _configure_logging(log_level: str, log_format: str, log_file: str | None, debug: bool) -> None:
    if debug:
        log_level = "DEBUG"
    try:
        configure_logging(
            level=LogLevel(log_level),
            format_type=LogFormat(log_format),
            log_file=Path(log_file) if log_file else None,
            enable_file=bool(log_file),
            enable_console=True,
        )
    except (ValueError, OSError) as e:
        click.echo(f"Error configuring logging: {e}", err=True)
        sys.exit(1)


def _select_mode(query: str, ignore_case: bool, exact: bool, wildcard: bool) -> SearchMode:
    if exact:
        return SearchMode.exact()
    if wildcard:
        return SearchMode.prefix_wildcard(query)
    if ignore_case:
        return SearchMode.case_insensitive()
    return SearchMode.from_env()


def _logging_options(func):
    func = click.option("--debug", is_flag=True, default=False, help="Enable debug logging")(func)
    func = click.option("--log-file", help="Also write logs to this file")(func)
    func = click.option(
        "--log-format",
        type=click.Choice([f.value for f in LogFormat]),
        default=LogFormat.SIMPLE.value,
        help="Log format",
    )(func)
    func = click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
        default="WARNING",
        help="Log level",
    )(func)
    return func


@click.group()
@click.version_option(__version__, prog_name="minigrep")
def cli() -> None:
    """minigrep - line-oriented text search"""
    pass


@cli.command("search")
@click.argument("query")
@click.argument("document_path", metavar="PATH")
@click.option("-n", "--line-numbers", "show_line_numbers", is_flag=True, default=False,
              help="Prefix each line with its line number")
@click.option("--max", "max_results", type=int, default=None, help="Keep only the first N matching lines")
@click.option("-i", "--ignore-case", is_flag=True, default=False,
              help="Case-insensitive search (also enabled by IGNORE_CASE=1)")
@click.option("--exact", is_flag=True, default=False, help="Match whole lines equal to the query")
@click.option("--wildcard", is_flag=True, default=False,
              help="Treat a trailing '*' as a prefix wildcard (not a regular expression)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--stats", is_flag=True, default=False, help="Print document statistics")
@click.option("--top-words", type=int, default=DEFAULT_TOP_WORDS, help="Words listed with --stats")
@_logging_options
def search_cmd(
    query: str,
    document_path: str,
    show_line_numbers: bool,
    max_results: int | None,
    ignore_case: bool,
    exact: bool,
    wildcard: bool,
    fmt: str,
    stats: bool,
    top_words: int,
    log_level: str,
    log_format: str,
    log_file: str | None,
    debug: bool,
) -> None:
    """Search PATH for QUERY and print every matching line."""
    _configure_logging(log_level, log_format, log_file, debug)

    if exact and wildcard:
        click.echo("Error: --exact and --wildcard cannot be used together", err=True)
        sys.exit(1)

    config = Config(
        query=query,
        document_path=document_path,
        mode=_select_mode(query, ignore_case, exact, wildcard),
        show_line_numbers=show_line_numbers,
        max_results=max_results,
    )
    engine = MiniGrep()

    try:
        results = engine.run(config)
    except SearchError as e:
        click.echo(f"Error: {e.message}", err=True)
        for suggestion in e.suggestions:
            click.echo(f"  - {suggestion}", err=True)
        sys.exit(1)

    output_format = OutputFormat(fmt)
    search_stats = analyze(engine.last_contents or "", results) if stats else None

    if not results and output_format != OutputFormat.JSON:
        click.echo(f"No matches for '{query}' ({strategy_for(config.mode).display_name})")
        if search_stats is not None:
            click.echo(format_stats(search_stats, top_words))
    else:
        rendered = format_result(
            results,
            output_format,
            show_line_numbers=config.show_line_numbers,
            stats=search_stats,
            top_words=top_words,
        )
        if rendered:
            click.echo(rendered)

    if not results:
        sys.exit(1)


@cli.command("stats")
@click.argument("document_path", metavar="PATH")
@click.option("--top-words", type=int, default=10, help="Number of most common words to list")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([OutputFormat.TEXT.value, OutputFormat.JSON.value]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
def stats_cmd(document_path: str, top_words: int, fmt: str) -> None:
    """Print line count and most common words of PATH."""
    path = Path(document_path)
    try:
        contents = read_document(path)
    except (OSError, UnicodeError) as exc:
        error = classify_read_error(path, exc)
        click.echo(f"Error: {error.message}", err=True)
        sys.exit(1)

    document_stats = analyze(contents, [])
    if OutputFormat(fmt) == OutputFormat.JSON:
        click.echo(to_json_bytes([], document_stats, top_words).decode("utf-8"))
        return

    click.echo(f"{path}: {document_stats.total_lines} lines, "
               f"{sum(document_stats.word_frequency.values())} words, "
               f"{len(document_stats.word_frequency)} distinct")
    for word, count in document_stats.most_common_words(top_words):
        click.echo(f"  {word}: {count}")


def main() -> None:
    cli(prog_name="minigrep")


if __name__ == "__main__":
    main()
