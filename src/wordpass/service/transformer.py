"""Case transformations applied to the drawn words.

The helpers are pure; only :attr:`CaseTransform.RANDOM` consults the random
service, once per :meth:`DefaultTransformerService.transform` call.  Words are
opaque Unicode strings: characters without case (digits, punctuation) pass
through unchanged because :meth:`str.upper` and :meth:`str.lower` leave them
alone.
"""

from __future__ import annotations

from collections.abc import Callable

from wordpass.config import CaseTransform, Settings
from wordpass.config.options import VOWELS
from wordpass.utils.errors import UnsupportedMode
from wordpass.utils.logging import get_logger

from .base import RandomService

log = get_logger(__name__)


def capitalise(word: str) -> str:
    """Uppercase the first character, leaving the rest unchanged."""

    return word[:1].upper() + word[1:]


def capitalise_invert(word: str) -> str:
    """Lowercase the first character and uppercase the rest."""

    return word[:1].lower() + word[1:].upper()


def alternate_lettercase(word: str) -> str:
    """Alternate lower/upper per character, starting with lowercase."""

    return "".join(ch.upper() if i % 2 else ch.lower() for i, ch in enumerate(word))


def lower_vowel_upper_consonant(word: str) -> str:
    """Force vowels to lowercase and every other letter to uppercase."""

    return "".join(ch.lower() if ch in VOWELS else ch.upper() for ch in word)


def alternate(words: list[str]) -> list[str]:
    """Lowercase even-indexed words and uppercase odd-indexed words."""

    return [w.upper() if i % 2 else w.lower() for i, w in enumerate(words)]


def sentence(words: list[str]) -> list[str]:
    """Capitalise the first word and lowercase all subsequent words."""

    return [capitalise(w) if i == 0 else w.lower() for i, w in enumerate(words)]


_PER_WORD: dict[CaseTransform, Callable[[str], str]] = {
    CaseTransform.UPPER: str.upper,
    CaseTransform.LOWER: str.lower,
    CaseTransform.CAPITALISE: capitalise,
    CaseTransform.CAPITALISE_INVERT: capitalise_invert,
    CaseTransform.INVERT: capitalise_invert,
    CaseTransform.ALTERNATE_LETTERCASE: alternate_lettercase,
    CaseTransform.LOWER_VOWEL_UPPER_CONSONANT: lower_vowel_upper_consonant,
}


class DefaultTransformerService:
    """Apply the configured :class:`CaseTransform` to a word sequence."""

    def __init__(self, cfg: Settings, rng: RandomService) -> None:
        self.cfg = cfg
        self.rng = rng
        self.mode = self._validate()
        log.debug("case transform %s", self.mode.value)

    def _validate(self) -> CaseTransform:
        try:
            return CaseTransform(self.cfg.case_transform)
        except ValueError:
            raise UnsupportedMode(
                f"Unsupported case transform: '{self.cfg.case_transform}'"
            ) from None

    def transform(self, words: list[str]) -> list[str]:
        """Return a new list with the case transform applied.

        ``random`` flips one coin per call through ``generate_with_max(2)``:
        ``0`` leaves the words untouched, ``1`` uppercases all of them.
        """

        mode = self.mode
        if mode is CaseTransform.RANDOM:
            flip = self.rng.generate_with_max(2)
            mode = CaseTransform.UPPER if flip == 1 else CaseTransform.NONE

        if mode is CaseTransform.NONE:
            return list(words)
        if mode is CaseTransform.ALTERNATE:
            return alternate(words)
        if mode is CaseTransform.SENTENCE:
            return sentence(words)
        func = _PER_WORD[mode]
        return [func(w) for w in words]


__all__ = [
    "DefaultTransformerService",
    "alternate",
    "alternate_lettercase",
    "capitalise",
    "capitalise_invert",
    "lower_vowel_upper_consonant",
    "sentence",
]
