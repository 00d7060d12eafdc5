"""Small predicates and checks shared by the service validators."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from typing import TypeVar

from .errors import EmptyAlphabet, InvalidConfiguration

T = TypeVar("T")


def has_element_longer_than_one(items: Iterable[str]) -> bool:
    """Return ``True`` if any element of ``items`` has more than one character."""

    return any(len(item) > 1 for item in items)


def has_digit(items: Iterable[str]) -> bool:
    """Return ``True`` if any element of ``items`` is a digit."""

    return any(item.isdigit() for item in items)


def is_element_in(items: Collection[T], item: T) -> bool:
    """Return ``True`` if ``item`` occurs in ``items``."""

    return item in items


def validate_alphabet(alphabet: Sequence[str], name: str) -> None:
    """Check that ``alphabet`` can serve random character draws.

    Raises
    ------
    EmptyAlphabet
        If ``alphabet`` has no entries.
    InvalidConfiguration
        If an entry is longer than one character.
    """

    if not alphabet:
        raise EmptyAlphabet(f"{name} must not be empty when the character is random")
    if has_element_longer_than_one(alphabet):
        raise InvalidConfiguration(f"{name} entries must be at most one character")


def validate_separator_alphabet(alphabet: Sequence[str]) -> None:
    """Check ``alphabet`` like :func:`validate_alphabet` and reject digits.

    Edge trimming runs after digit padding, so a digit separator would be
    indistinguishable from a padding digit.
    """

    validate_alphabet(alphabet, "separator_alphabet")
    if has_digit(alphabet):
        raise InvalidConfiguration("separator_alphabet must not contain digits")


__all__ = [
    "has_digit",
    "has_element_longer_than_one",
    "is_element_in",
    "validate_alphabet",
    "validate_separator_alphabet",
]
