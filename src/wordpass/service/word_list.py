"""Word sampling from a length-filtered word list."""

from __future__ import annotations

from collections.abc import Callable

from wordpass.config import Settings
from wordpass.utils.errors import EmptyWordList, InvalidConfiguration
from wordpass.utils.logging import get_logger
from wordpass.wordlists import filter_by_length, load_words

from .base import RandomService

log = get_logger(__name__)

WordLoader = Callable[[str], list[str]]


class DefaultWordListService:
    """Draw ``num_words`` words with replacement from a filtered list.

    The filtered list is computed once here and never modified afterwards.
    """

    def __init__(
        self,
        cfg: Settings,
        rng: RandomService,
        *,
        loader: WordLoader = load_words,
    ) -> None:
        """Validate ``cfg`` and load the filtered word list.

        Parameters
        ----------
        cfg:
            Settings providing ``num_words``, ``word_list`` and the length
            bounds.
        rng:
            Random service used for index draws.
        loader:
            Word source collaborator; defaults to
            :func:`wordpass.wordlists.load_words`.

        Raises
        ------
        InvalidConfiguration
            If ``num_words < 2`` or the length bounds are inconsistent.
        UnknownWordList, SourceUnavailable, MalformedSource
            Propagated from ``loader``.
        EmptyWordList
            If no word falls within the length bounds.
        """

        self.cfg = cfg
        self.rng = rng
        self._validate()
        words = filter_by_length(loader(cfg.word_list), cfg.word_length_min, cfg.word_length_max)
        if not words:
            raise EmptyWordList(
                f"No words in '{cfg.word_list}' with length between "
                f"{cfg.word_length_min} and {cfg.word_length_max}"
            )
        self._words: tuple[str, ...] = tuple(words)
        log.debug("word list %s filtered to %d candidates", cfg.word_list, len(self._words))

    def _validate(self) -> None:
        if self.cfg.num_words < 2:
            raise InvalidConfiguration(
                f"num_words must be at least 2, got {self.cfg.num_words}"
            )
        if self.cfg.word_length_min < 1:
            raise InvalidConfiguration(
                f"word_length_min must be at least 1, got {self.cfg.word_length_min}"
            )
        if self.cfg.word_length_min > self.cfg.word_length_max:
            raise InvalidConfiguration(
                f"word_length_min ({self.cfg.word_length_min}) must not exceed "
                f"word_length_max ({self.cfg.word_length_max})"
            )

    @property
    def words(self) -> tuple[str, ...]:
        """The filtered candidate words."""

        return self._words

    def get_words(self) -> list[str]:
        indices = self.rng.generate_sequence_with_max(self.cfg.num_words, len(self._words))
        return [self._words[i] for i in indices]


__all__ = ["DefaultWordListService", "WordLoader"]
