"""Enumerated option values and character tables shared by the services."""

from __future__ import annotations

from enum import Enum
from typing import Final

__all__ = [
    "CaseTransform",
    "PaddingType",
    "RANDOM",
    "DEFAULT_SPECIAL_CHARACTERS",
    "ALLOWED_CHARACTERS",
    "VOWELS",
]

# Sentinel accepted by ``separator_character`` and ``padding_character``.
RANDOM: Final = "random"

DEFAULT_SPECIAL_CHARACTERS: Final[tuple[str, ...]] = (
    "!", "@", "$", "%", "^", "&", "*", "-", "_",
    "+", "=", ":", "|", "~", "?", "/", ".", ";",
)

# Literal separator or padding characters must come from this set.
ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset(
    DEFAULT_SPECIAL_CHARACTERS + ("#", ",", " ")
)

VOWELS: Final[frozenset[str]] = frozenset("aeiouAEIOU")


class CaseTransform(str, Enum):
    """Case transformation applied to the drawn words."""

    ALTERNATE = "alternate"
    ALTERNATE_LETTERCASE = "alternate_lettercase"
    CAPITALISE = "capitalise"
    CAPITALISE_INVERT = "capitalise_invert"
    INVERT = "invert"
    LOWER = "lower"
    LOWER_VOWEL_UPPER_CONSONANT = "lower_vowel_upper_consonant"
    NONE = "none"
    RANDOM = "random"
    SENTENCE = "sentence"
    UPPER = "upper"


class PaddingType(str, Enum):
    """How symbol padding is added around the password body."""

    NONE = "none"
    FIXED = "fixed"
    ADAPTIVE = "adaptive"
