"""Digit and symbol padding around the separated words.

:meth:`DefaultPaddingService.pad` runs four steps in order:

1. prepend ``padding_digits_before`` and append ``padding_digits_after``
   random decimal digits as separate elements;
2. strip separator elements from both ends of the sequence, so symbol padding
   sits against word or digit content rather than a bare separator;
3. join the elements without a delimiter;
4. add symbol padding according to :class:`PaddingType`.

Adaptive padding only ever appends and never truncates.
"""

from __future__ import annotations

from wordpass.config import ALLOWED_CHARACTERS, RANDOM, PaddingType, Settings
from wordpass.utils.errors import InvalidConfiguration, InvalidMode
from wordpass.utils.logging import get_logger
from wordpass.utils.validators import has_digit, is_element_in, validate_alphabet

from .base import RandomService

log = get_logger(__name__)


class DefaultPaddingService:
    """Pad a separated word sequence into the final password string."""

    def __init__(self, cfg: Settings, rng: RandomService) -> None:
        self.cfg = cfg
        self.rng = rng
        self.mode = self._validate()
        log.debug("padding mode %s", self.mode.value)

    # -- validation ---------------------------------------------------------

    def _validate(self) -> PaddingType:
        cfg = self.cfg
        if cfg.padding_digits_before < 0 or cfg.padding_digits_after < 0:
            raise InvalidConfiguration("padding digit counts must not be negative")
        if cfg.separator_character == RANDOM and has_digit(cfg.separator_alphabet):
            raise InvalidConfiguration("separator_alphabet must not contain digits")

        try:
            mode = PaddingType(cfg.padding_type)
        except ValueError:
            raise InvalidMode(f"Invalid padding type: '{cfg.padding_type}'") from None

        if mode is PaddingType.FIXED:
            if cfg.padding_characters_before < 0 or cfg.padding_characters_after < 0:
                raise InvalidConfiguration("padding character counts must not be negative")
            self._validate_character()
        elif mode is PaddingType.ADAPTIVE:
            if cfg.pad_to_length < 0:
                raise InvalidConfiguration(
                    f"pad_to_length must not be negative, got {cfg.pad_to_length}"
                )
            self._validate_character()
        return mode

    def _validate_character(self) -> None:
        char = self.cfg.padding_character
        if char == RANDOM:
            validate_alphabet(self.cfg.symbol_alphabet, "symbol_alphabet")
        elif char and not is_element_in(ALLOWED_CHARACTERS, char):
            raise InvalidConfiguration(f"Invalid padding character: '{char}'")

    # -- steps ----------------------------------------------------------------

    def _random_digits(self, count: int) -> list[str]:
        return [str(self.rng.generate_digit()) for _ in range(count)]

    def digits(self, words: list[str]) -> list[str]:
        """Return ``words`` with random digit elements added at both ends."""

        before = self._random_digits(self.cfg.padding_digits_before)
        after = self._random_digits(self.cfg.padding_digits_after)
        return before + list(words) + after

    def _is_separator(self, element: str) -> bool:
        if self.cfg.separator_character == RANDOM:
            return is_element_in(self.cfg.separator_alphabet, element)
        return element == self.cfg.separator_character

    def remove_edge_separators(self, words: list[str]) -> list[str]:
        """Strip separator elements from the start and end of ``words``."""

        start, end = 0, len(words)
        while start < end and self._is_separator(words[start]):
            start += 1
        while end > start and self._is_separator(words[end - 1]):
            end -= 1
        return words[start:end]

    def _character(self) -> str:
        char = self.cfg.padding_character
        if char != RANDOM:
            return char
        alphabet = self.cfg.symbol_alphabet
        return alphabet[self.rng.generate_with_max(len(alphabet))]

    def fixed(self, pw: str, char: str) -> str:
        """Wrap ``pw`` in the configured number of ``char`` copies."""

        before = char * self.cfg.padding_characters_before
        after = char * self.cfg.padding_characters_after
        return f"{before}{pw}{after}"

    def adaptive(self, pw: str, char: str) -> str:
        """Append ``char`` until ``pw`` reaches ``pad_to_length`` characters."""

        missing = self.cfg.pad_to_length - len(pw)
        if missing <= 0 or not char:
            return pw
        return pw + char * missing

    def symbols(self, pw: str) -> str:
        """Apply the configured symbol padding mode to ``pw``."""

        if self.mode is PaddingType.NONE:
            return pw
        char = self._character()
        if self.mode is PaddingType.FIXED:
            return self.fixed(pw, char)
        return self.adaptive(pw, char)

    def pad(self, words: list[str]) -> str:
        elements = self.remove_edge_separators(self.digits(words))
        return self.symbols("".join(elements))


__all__ = ["DefaultPaddingService"]
