"""Cryptographically secure random integers.

:class:`SecureRandomService` draws bytes from the operating system CSPRNG
(:func:`os.urandom`) and maps them to integers with rejection sampling: for an
upper bound ``max`` only the bits needed to represent ``max - 1`` are kept and
any candidate ``>= max`` is discarded and redrawn.  No modulo reduction takes
place, so every value in ``[0, max)`` is equally likely.

Security notes
--------------
This service is the trust boundary of the package.  If the entropy source
fails, :class:`~wordpass.utils.errors.RandomFailure` is raised; the service
never falls back to :mod:`random` or any other weaker generator.  The instance
keeps no mutable state, so one service may be shared between threads.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Final

from wordpass.utils.errors import InvalidLength, InvalidRange, RandomFailure

EntropySource = Callable[[int], bytes]

# Width of ``generate()``: non-negative values of a signed 64-bit integer.
DEFAULT_BITS: Final = 63
DEFAULT_MAX: Final = 1 << DEFAULT_BITS


class SecureRandomService:
    """Rejection-sampled integers from a secure byte source."""

    def __init__(self, entropy: EntropySource | None = None) -> None:
        """Initialize the service.

        Parameters
        ----------
        entropy:
            Callable returning ``n`` random bytes.  Defaults to
            :func:`os.urandom`; tests may inject a deterministic source.
        """

        self._entropy: EntropySource = entropy or os.urandom

    def _random_bits(self, bits: int) -> int:
        nbytes = (bits + 7) // 8
        try:
            data = self._entropy(nbytes)
        except Exception as exc:
            raise RandomFailure(f"Entropy source failed: {exc}") from exc
        if len(data) != nbytes:
            raise RandomFailure(f"Entropy source returned {len(data)} bytes, expected {nbytes}")
        value = int.from_bytes(data, "big")
        return value & ((1 << bits) - 1)

    def _below(self, max: int) -> int:
        if max == 1:
            return 0
        bits = (max - 1).bit_length()
        while True:
            candidate = self._random_bits(bits)
            if candidate < max:
                return candidate

    def generate(self) -> int:
        return self._random_bits(DEFAULT_BITS)

    def generate_with_max(self, max: int) -> int:
        """Return a uniform integer in ``[0, max)``.

        Raises
        ------
        InvalidRange
            If ``max <= 0``.
        """

        if max <= 0:
            raise InvalidRange(f"max must be greater than 0, got {max}")
        return self._below(max)

    def generate_digit(self) -> int:
        return self._below(10)

    def generate_sequence(self, length: int) -> list[int]:
        """Return ``length`` integers drawn like :meth:`generate`."""

        if length < 0:
            raise InvalidLength(f"length must not be negative, got {length}")
        return [self.generate() for _ in range(length)]

    def generate_sequence_with_max(self, length: int, max: int) -> list[int]:
        """Return ``length`` integers in ``[0, max)``.

        Raises
        ------
        InvalidLength
            If ``length < 0``.
        InvalidRange
            If ``max < 1``.
        """

        if length < 0:
            raise InvalidLength(f"length must not be negative, got {length}")
        if max < 1:
            raise InvalidRange(f"max must be at least 1, got {max}")
        return [self._below(max) for _ in range(length)]


__all__ = ["DEFAULT_BITS", "DEFAULT_MAX", "EntropySource", "SecureRandomService"]
