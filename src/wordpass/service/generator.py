"""Password generation orchestrator.

:class:`GeneratorService` composes the four pipeline stages and runs them once
per requested password.  Any exception raised by a stage propagates unchanged
and aborts the whole :meth:`GeneratorService.generate` call, so callers either
receive exactly ``num_passwords`` passwords or an error with no partial output.
"""

from __future__ import annotations

from wordpass.config import Settings
from wordpass.utils.errors import InvalidCount
from wordpass.utils.logging import get_logger

from .base import (
    PaddingService,
    RandomService,
    SeparatorService,
    TransformerService,
    WordListService,
)
from .padding import DefaultPaddingService
from .rng import SecureRandomService
from .separator import DefaultSeparatorService
from .transformer import DefaultTransformerService
from .word_list import DefaultWordListService

log = get_logger(__name__)

MIN_PASSWORDS = 1
MAX_PASSWORDS = 10


class GeneratorService:
    """Generate passwords by chaining the pipeline services."""

    def __init__(
        self,
        cfg: Settings,
        *,
        word_list: WordListService,
        transformer: TransformerService,
        separator: SeparatorService,
        padding: PaddingService,
    ) -> None:
        if not MIN_PASSWORDS <= cfg.num_passwords <= MAX_PASSWORDS:
            raise InvalidCount(
                f"num_passwords must be between {MIN_PASSWORDS} and {MAX_PASSWORDS}, "
                f"got {cfg.num_passwords}"
            )
        self.cfg = cfg
        self.word_list = word_list
        self.transformer = transformer
        self.separator = separator
        self.padding = padding

    @classmethod
    def from_settings(cls, cfg: Settings, rng: RandomService | None = None) -> "GeneratorService":
        """Build the default service graph for ``cfg``.

        All stages share one random service; ``rng`` defaults to a fresh
        :class:`~wordpass.service.rng.SecureRandomService`.
        """

        rng = rng or SecureRandomService()
        return cls(
            cfg,
            word_list=DefaultWordListService(cfg, rng),
            transformer=DefaultTransformerService(cfg, rng),
            separator=DefaultSeparatorService(cfg, rng),
            padding=DefaultPaddingService(cfg, rng),
        )

    def generate_one(self) -> str:
        words = self.word_list.get_words()
        words = self.transformer.transform(words)
        words = self.separator.separate(words)
        return self.padding.pad(words)

    def generate(self) -> list[str]:
        """Return ``num_passwords`` freshly generated passwords."""

        passwords = [self.generate_one() for _ in range(self.cfg.num_passwords)]
        log.debug("generated %d passwords", len(passwords))
        return passwords


__all__ = ["GeneratorService", "MAX_PASSWORDS", "MIN_PASSWORDS"]
