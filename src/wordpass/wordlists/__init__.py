"""Identifier based registry of word lists.

Built-in lists ship as package resources under ``data/``; additional lists can
be registered from the filesystem with :func:`register_word_list`.  Identifiers
are matched case-insensitively.

``UnknownWordList`` is raised when an identifier has no registered source.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from importlib import resources as importlib_resources
from pathlib import Path

from ..utils.errors import UnknownWordList
from .reader import WordSource, parse_words, read_words

_SOURCES: dict[str, WordSource] = {}

BUILTIN_WORD_LISTS: tuple[str, ...] = ("en", "en_small", "de", "fr")


def _key(identifier: str) -> str:
    return identifier.strip().lower()


def register_word_list(identifier: str, source: str | os.PathLike[str] | WordSource) -> None:
    """Register ``source`` as the word list for ``identifier``.

    Parameters
    ----------
    identifier:
        Name used in ``Settings.word_list``.  Matching is case-insensitive.
    source:
        Filesystem path or package resource holding newline-delimited words.
    """

    if isinstance(source, (str, os.PathLike)):
        source = Path(source)
    _SOURCES[_key(identifier)] = source


def available_word_lists() -> list[str]:
    """Return the sorted identifiers of every registered word list."""

    return sorted(_SOURCES)


def load_words(identifier: str) -> list[str]:
    """Load the raw words registered under ``identifier``.

    Raises
    ------
    UnknownWordList
        If no list is registered for ``identifier``.
    SourceUnavailable, MalformedSource
        If the registered resource cannot be read or decoded.
    """

    source = _SOURCES.get(_key(identifier))
    if source is None:
        raise UnknownWordList(f"Unknown word list: '{identifier}'") from None
    return read_words(source)


def filter_by_length(words: Iterable[str], min_length: int, max_length: int) -> list[str]:
    """Return ``words`` whose length lies in ``[min_length, max_length]``."""

    return [word for word in words if min_length <= len(word) <= max_length]


_DATA = importlib_resources.files(__name__).joinpath("data")
for _name in BUILTIN_WORD_LISTS:
    register_word_list(_name, _DATA.joinpath(f"{_name}.txt"))

__all__ = [
    "BUILTIN_WORD_LISTS",
    "WordSource",
    "available_word_lists",
    "filter_by_length",
    "load_words",
    "parse_words",
    "read_words",
    "register_word_list",
]
