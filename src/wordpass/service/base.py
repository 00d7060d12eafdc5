"""Service protocols for the generation pipeline.

Each stage of the pipeline is described by a structural :class:`Protocol` so
that production services and test doubles are interchangeable without
inheritance.  Data flows strictly::

    WordListService -> TransformerService -> SeparatorService -> PaddingService

and :class:`~wordpass.service.generator.GeneratorService` repeats that chain
once per requested password.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomService(Protocol):
    """Uniform integers drawn from a cryptographically secure source."""

    def generate(self) -> int:
        """Return a non-negative integer from the full default range."""

        ...

    def generate_with_max(self, max: int) -> int:
        """Return an integer in ``[0, max)``."""

        ...

    def generate_digit(self) -> int:
        """Return an integer in ``[0, 9]``."""

        ...

    def generate_sequence(self, length: int) -> list[int]:
        """Return ``length`` integers from the default range."""

        ...

    def generate_sequence_with_max(self, length: int, max: int) -> list[int]:
        """Return ``length`` integers in ``[0, max)``."""

        ...


@runtime_checkable
class WordListService(Protocol):
    """Source of candidate words for one password."""

    def get_words(self) -> list[str]:
        ...


@runtime_checkable
class TransformerService(Protocol):
    """Case transformation over a sequence of words."""

    def transform(self, words: list[str]) -> list[str]:
        ...


@runtime_checkable
class SeparatorService(Protocol):
    """Interleaves separator characters around words."""

    def separate(self, words: list[str]) -> list[str]:
        ...


@runtime_checkable
class PaddingService(Protocol):
    """Turns separated elements into the final padded password."""

    def pad(self, words: list[str]) -> str:
        ...


__all__ = [
    "RandomService",
    "WordListService",
    "TransformerService",
    "SeparatorService",
    "PaddingService",
]
