"""Typer-based command line interface for passphrase generation.

The ``generate`` command loads settings (defaults, optional preset, optional
YAML/JSON file and command line overrides), builds the service pipeline and
prints one password per line.  ``presets`` and ``word-lists`` list the
built-in catalogs.

Exit codes
----------
0 success
3 word-list I/O error (resource missing or undecodable)
4 configuration error
5 generation error (entropy failure or unexpected exception)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import CaseTransform, PaddingType, Settings, load_config, preset_names
from .service import GeneratorService
from .utils.errors import (
    EmptyWordList,
    InvalidConfiguration,
    MalformedSource,
    SourceUnavailable,
    UnknownWordList,
)
from .utils.logging import configure_logging
from .wordlists import available_word_lists

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="wordpass",
    help="Generate memorable multi-word passwords. Use 'wordpass generate' to start.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _collect_overrides(**options: Any) -> dict[str, Any]:
    """Return the command line options that were actually supplied."""

    overrides: dict[str, Any] = {}
    for key, value in options.items():
        if value is None:
            continue
        if isinstance(value, (CaseTransform, PaddingType)):
            value = value.value
        overrides[key] = value
    return overrides


def _build_generator(cfg: Settings) -> GeneratorService:
    try:
        return GeneratorService.from_settings(cfg)
    except (SourceUnavailable, MalformedSource) as exc:
        _safe_exit(3, str(exc))
    except (InvalidConfiguration, UnknownWordList, EmptyWordList) as exc:
        _safe_exit(4, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the wordpass command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML or JSON settings to override defaults"
    ),
    preset: Optional[str] = typer.Option(  # noqa: B008
        None, "--preset", "-p", help="Preset to start from (see 'wordpass presets')"
    ),
    num_passwords: Optional[int] = typer.Option(  # noqa: B008
        None, "--num-passwords", "-n", help="Number of passwords [1-10]"
    ),
    num_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--num-words", "-w", help="Words per password"
    ),
    word_list: Optional[str] = typer.Option(  # noqa: B008
        None, "--word-list", help="Word list identifier (see 'wordpass word-lists')"
    ),
    case_transform: Optional[CaseTransform] = typer.Option(  # noqa: B008
        None, "--case-transform", "-c", help="Case transformation mode"
    ),
    separator_character: Optional[str] = typer.Option(  # noqa: B008
        None, "--separator", "-s", help="Separator character or 'random'"
    ),
    padding_type: Optional[PaddingType] = typer.Option(  # noqa: B008
        None, "--padding-type", help="Symbol padding mode"
    ),
    pad_to_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--pad-to-length", help="Target length for adaptive padding"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> list[str]:
    """Generate passwords and print them to stdout."""

    configure_logging(verbose)

    overrides = _collect_overrides(
        num_passwords=num_passwords,
        num_words=num_words,
        word_list=word_list,
        case_transform=case_transform,
        separator_character=separator_character,
        padding_type=padding_type,
        pad_to_length=pad_to_length,
    )
    try:
        cfg = load_config(config_path, overrides, preset=preset)
    except (ValidationError, InvalidConfiguration, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo(f"Loaded config (preset={cfg.preset})", err=True)

    generator = _build_generator(cfg)
    try:
        passwords = generator.generate()
    except Exception as exc:
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)

    if as_json:
        typer.echo(json.dumps(passwords, ensure_ascii=False))
    else:
        for pw in passwords:
            typer.echo(pw)
    return passwords


@app.command("presets")
def list_presets() -> None:
    """List the built-in presets."""

    for name in preset_names():
        typer.echo(name)


@app.command("word-lists")
def list_word_lists() -> None:
    """List the registered word lists."""

    for name in available_word_lists():
        typer.echo(name)
