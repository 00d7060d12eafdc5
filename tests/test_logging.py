import io
import logging
import sys
from typing import Any

import pytest

from wordpass.config import Settings
from wordpass.service import DefaultTransformerService
from wordpass.utils.logging import configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("foo").name == "wordpass.foo"
    assert get_logger("wordpass.service.rng").name == "wordpass.service.rng"
    assert get_logger("wordpass").name == "wordpass"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(verbose=True)
    configure_logging(verbose=False)
    named = [h for h in logger.handlers if h.get_name() == "wordpass-stderr"]
    assert len(named) == 1
    assert logger.level == logging.WARNING
    configure_logging(verbose=True)
    assert logger.level == logging.DEBUG


def test_configure_logging_after_stream_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    first = io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    configure_logging(verbose=True)
    first.close()

    second = io.StringIO()
    monkeypatch.setattr(sys, "stderr", second)
    logger = configure_logging(verbose=True)
    get_logger("tests").warning("still writable")

    named = [h for h in logger.handlers if h.get_name() == "wordpass-stderr"]
    assert len(named) == 1
    assert "still writable" in second.getvalue()


def test_services_never_log_words(caplog: Any, fixed_rng: Any) -> None:
    cfg = Settings(case_transform="random")
    with caplog.at_level(logging.DEBUG, logger="wordpass"):
        svc = DefaultTransformerService(cfg, fixed_rng(1))
        out = svc.transform(["secret", "words"])
    assert out == ["SECRET", "WORDS"]
    assert "secret" not in caplog.text.lower()
    assert "random" in caplog.text
