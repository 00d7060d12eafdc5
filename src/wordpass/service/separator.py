"""Separator insertion between words."""

from __future__ import annotations

from wordpass.config import ALLOWED_CHARACTERS, RANDOM, Settings
from wordpass.utils.errors import InvalidConfiguration
from wordpass.utils.logging import get_logger
from wordpass.utils.validators import is_element_in, validate_separator_alphabet

from .base import RandomService

log = get_logger(__name__)


class DefaultSeparatorService:
    """Surround every word with the configured separator character.

    In random mode one character is drawn from ``separator_alphabet`` per
    :meth:`separate` call and reused for every gap of that password.
    """

    def __init__(self, cfg: Settings, rng: RandomService) -> None:
        self.cfg = cfg
        self.rng = rng
        self._validate()
        log.debug("separator %r", cfg.separator_character)

    def _validate(self) -> None:
        char = self.cfg.separator_character
        if char == RANDOM:
            validate_separator_alphabet(self.cfg.separator_alphabet)
        elif not is_element_in(ALLOWED_CHARACTERS, char):
            raise InvalidConfiguration(f"Invalid separator character: '{char}'")

    def _character(self) -> str:
        if self.cfg.separator_character != RANDOM:
            return self.cfg.separator_character
        alphabet = self.cfg.separator_alphabet
        return alphabet[self.rng.generate_with_max(len(alphabet))]

    def separate(self, words: list[str]) -> list[str]:
        """Return ``[sep, w1, sep, w2, ..., wn, sep]``.

        An empty ``words`` list yields ``[sep]``.
        """

        sep = self._character()
        out: list[str] = []
        for word in words:
            out.append(sep)
            out.append(word)
        out.append(sep)
        return out


__all__ = ["DefaultSeparatorService"]
