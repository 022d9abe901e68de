from __future__ import annotations

from pathlib import Path


def split_lines(text: str) -> list[str]:
    """
    Split a document into lines.

    A line is the text between ``\\n`` delimiters. A trailing ``\\r`` is dropped
    from each line, and a trailing newline does not open a final empty line, so
    ``""`` has no lines and ``"a\\n"`` has exactly one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def fold_case(text: str) -> str:
    """
    Lowercase ``text`` without changing its length.

    Characters whose lowercase form is longer than one character (for example
    ``"İ"``) are kept as they are, so every offset into the folded string is
    also a valid offset into the original.
    """
    if text.isascii():
        return text.lower()
    out: list[str] = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def read_document(path: Path) -> str:
    """
    Read a whole document into memory as UTF-8 text.

    A UTF-8 byte order mark is stripped. Decoding is strict: invalid bytes raise
    ``UnicodeDecodeError`` rather than being replaced.
    """
    return path.read_bytes().decode("utf-8-sig")


def highlight_spans(
    line: str, spans: list[tuple[int, int]], marker_left: str = "[", marker_right: str = "]"
) -> str:
    """Wrap each span of ``line`` in markers; an overlapping span starts where the previous one ended."""
    if not spans:
        return line
    spans = sorted(spans, key=lambda x: x[0])
    out: list[str] = []
    last = 0
    for a, b in spans:
        a = max(0, min(len(line), a))
        b = max(0, min(len(line), b))
        if a < last:
            a = last
        if b <= a:
            continue
        out.append(line[last:a])
        out.append(marker_left)
        out.append(line[a:b])
        out.append(marker_right)
        last = b
    out.append(line[last:])
    return "".join(out)
