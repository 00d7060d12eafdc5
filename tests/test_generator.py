from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wordpass.config import Settings
from wordpass.service import (
    DefaultWordListService,
    GeneratorService,
    PaddingService,
    SeparatorService,
    TransformerService,
    WordListService,
)
from wordpass.utils.errors import InvalidCount, RandomFailure

Make = Callable[..., Settings]


class StubWordList:
    def __init__(self, words: list[str] | None = None, exc: Exception | None = None) -> None:
        self.words = words or ["alpha", "beta"]
        self.exc = exc
        self.calls = 0

    def get_words(self) -> list[str]:
        self.calls += 1
        if self.exc is not None and self.calls > 1:
            raise self.exc
        return list(self.words)


class UpperTransformer:
    def transform(self, words: list[str]) -> list[str]:
        return [w.upper() for w in words]


class DashSeparator:
    def separate(self, words: list[str]) -> list[str]:
        out = ["-"]
        for w in words:
            out.extend([w, "-"])
        return out


class JoinPadding:
    def pad(self, words: list[str]) -> str:
        return "".join(words).strip("-")


def _stages(word_list: Any = None) -> dict[str, Any]:
    return {
        "word_list": word_list or StubWordList(),
        "transformer": UpperTransformer(),
        "separator": DashSeparator(),
        "padding": JoinPadding(),
    }


def test_stub_stages_satisfy_protocols() -> None:
    stages = _stages()
    assert isinstance(stages["word_list"], WordListService)
    assert isinstance(stages["transformer"], TransformerService)
    assert isinstance(stages["separator"], SeparatorService)
    assert isinstance(stages["padding"], PaddingService)


@pytest.mark.parametrize("count", [0, -1, 11])
def test_invalid_count(settings: Make, count: int) -> None:
    with pytest.raises(InvalidCount):
        GeneratorService(settings(num_passwords=count), **_stages())


@pytest.mark.parametrize("count", [1, 3, 10])
def test_generate_returns_requested_count(settings: Make, count: int) -> None:
    gen = GeneratorService(settings(num_passwords=count), **_stages())
    passwords = gen.generate()
    assert passwords == ["ALPHA-BETA"] * count


def test_stages_run_once_per_password(settings: Make) -> None:
    word_list = StubWordList()
    GeneratorService(settings(num_passwords=4), **_stages(word_list)).generate()
    assert word_list.calls == 4


def test_stage_failure_aborts_without_partial_output(settings: Make) -> None:
    word_list = StubWordList(exc=RandomFailure("entropy source unavailable"))
    gen = GeneratorService(settings(num_passwords=3), **_stages(word_list))
    with pytest.raises(RandomFailure, match="entropy"):
        gen.generate()
    assert word_list.calls == 2


def test_from_settings_end_to_end(fixed_rng: Any) -> None:
    cfg = Settings(
        num_passwords=2,
        num_words=3,
        word_list="en_small",
        case_transform="upper",
        separator_character="-",
        padding_type="fixed",
        padding_character="*",
        padding_digits_before=1,
        padding_digits_after=1,
        padding_characters_before=1,
        padding_characters_after=1,
    )
    word = DefaultWordListService(cfg, fixed_rng(1)).words[1].upper()

    passwords = GeneratorService.from_settings(cfg, fixed_rng(1)).generate()

    assert passwords == [f"*1-{word}-{word}-{word}-1*"] * 2


def test_from_settings_shares_one_random_service(fixed_rng: Any) -> None:
    rng = fixed_rng(0)
    gen = GeneratorService.from_settings(Settings(word_list="en_small"), rng)
    assert gen.word_list.rng is rng  # type: ignore[attr-defined]
    assert gen.transformer.rng is rng  # type: ignore[attr-defined]
    assert gen.separator.rng is rng  # type: ignore[attr-defined]
    assert gen.padding.rng is rng  # type: ignore[attr-defined]


def test_from_settings_with_secure_random() -> None:
    cfg = Settings(num_passwords=5, word_list="en_small", case_transform="lower")
    passwords = GeneratorService.from_settings(cfg).generate()
    assert len(passwords) == 5
    assert all(isinstance(pw, str) and pw for pw in passwords)


def test_random_failure_propagates(failing_rng: Any) -> None:
    cfg = Settings(word_list="en_small")
    gen = GeneratorService.from_settings(cfg, failing_rng(RandomFailure("boom")))
    with pytest.raises(RandomFailure):
        gen.generate()
