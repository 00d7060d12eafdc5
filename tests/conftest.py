"""Shared test doubles for the pipeline services."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from wordpass.config import Settings


class FixedRandomService:
    """Random service double returning ``value`` from every draw."""

    def __init__(self, value: int = 1) -> None:
        self.value = value
        self.calls: list[tuple[str, Any]] = []

    def generate(self) -> int:
        self.calls.append(("generate", None))
        return self.value

    def generate_with_max(self, max: int) -> int:
        self.calls.append(("generate_with_max", max))
        return self.value

    def generate_digit(self) -> int:
        self.calls.append(("generate_digit", None))
        return self.value

    def generate_sequence(self, length: int) -> list[int]:
        return self.generate_sequence_with_max(length, 2)

    def generate_sequence_with_max(self, length: int, max: int) -> list[int]:
        self.calls.append(("generate_sequence_with_max", (length, max)))
        return [self.value] * length


class FailingRandomService:
    """Random service double whose every draw fails."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def generate(self) -> int:
        raise self.exc

    def generate_with_max(self, max: int) -> int:
        raise self.exc

    def generate_digit(self) -> int:
        raise self.exc

    def generate_sequence(self, length: int) -> list[int]:
        raise self.exc

    def generate_sequence_with_max(self, length: int, max: int) -> list[int]:
        raise self.exc


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers bound to streams that a test has since closed."""

    yield
    logger = logging.getLogger("wordpass")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_rng() -> Callable[[int], FixedRandomService]:
    return FixedRandomService


@pytest.fixture
def failing_rng() -> Callable[[Exception], FailingRandomService]:
    return FailingRandomService


@pytest.fixture
def settings() -> Callable[..., Settings]:
    """Build settings without loader validation so services see raw values."""

    def make(**fields: Any) -> Settings:
        return Settings.model_construct(**fields)

    return make
