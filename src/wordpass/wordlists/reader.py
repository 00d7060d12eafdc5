"""Plain-text word-list reader.

Word lists are newline-delimited UTF-8 text.  A UTF-8 byte-order mark is
consumed when present, surrounding whitespace is stripped from every line and
blank lines are skipped.  Words are otherwise treated as opaque strings: no
case folding or Unicode normalization takes place.
"""

from __future__ import annotations

from importlib.resources.abc import Traversable
from pathlib import Path

from wordpass.utils.errors import MalformedSource, SourceUnavailable

WordSource = Path | Traversable


def parse_words(text: str) -> list[str]:
    """Split ``text`` into words, one per non-blank line, in file order."""

    words: list[str] = []
    for line in text.splitlines():
        word = line.strip()
        if word:
            words.append(word)
    return words


def read_words(source: WordSource, *, encoding: str = "utf-8-sig") -> list[str]:
    """Read and parse the word list stored at ``source``.

    Raises
    ------
    SourceUnavailable
        If the resource is missing or cannot be read.
    MalformedSource
        If the bytes are not valid text in ``encoding``.
    """

    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise SourceUnavailable(f"Cannot read word list '{source}': {exc}") from exc
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MalformedSource(f"Word list '{source}' is not valid {encoding}") from exc
    return parse_words(text)


__all__ = ["WordSource", "parse_words", "read_words"]
