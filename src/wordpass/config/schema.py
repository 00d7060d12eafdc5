"""Typed settings schema and loader for the passphrase generator."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wordpass.utils.errors import UnknownPreset
from wordpass.utils.validators import has_digit

from .options import DEFAULT_SPECIAL_CHARACTERS, RANDOM, CaseTransform, PaddingType

# ---------------------------------------------------------------------------
# Pydantic model
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    """Fully resolved generation settings.

    Instances are frozen.  The loader checks types and ranges here; every
    service checks the fields it uses again when it is constructed.
    """

    preset: str = "default"
    num_passwords: int = Field(default=3, ge=1, le=10)
    num_words: int = Field(default=3, ge=2)
    word_list: str = "en"
    word_length_min: int = Field(default=4, ge=1)
    word_length_max: int = Field(default=8, ge=1)
    case_transform: CaseTransform = CaseTransform.RANDOM
    separator_character: str = RANDOM
    separator_alphabet: tuple[str, ...] = DEFAULT_SPECIAL_CHARACTERS
    padding_type: PaddingType = PaddingType.FIXED
    padding_character: str = RANDOM
    padding_digits_before: int = Field(default=2, ge=0)
    padding_digits_after: int = Field(default=2, ge=0)
    padding_characters_before: int = Field(default=2, ge=0)
    padding_characters_after: int = Field(default=2, ge=0)
    pad_to_length: int = Field(default=0, ge=0)
    symbol_alphabet: tuple[str, ...] = DEFAULT_SPECIAL_CHARACTERS

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("case_transform", "padding_type", "word_list", "preset", mode="before")
    @classmethod
    def _lower_keyword(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("separator_character", "padding_character", mode="before")
    @classmethod
    def _normalize_sentinel(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() == RANDOM:
            return RANDOM
        return value

    @field_validator("separator_alphabet", "symbol_alphabet")
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for item in value:
            if len(item) > 1:
                raise ValueError(f"alphabet entries must be at most one character: {item!r}")
        return value

    @field_validator("separator_alphabet")
    @classmethod
    def _no_digit_separators(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if has_digit(value):
            raise ValueError("separator_alphabet must not contain digits")
        return value

    @model_validator(mode="after")
    def _length_bounds(self) -> "Settings":
        if self.word_length_min > self.word_length_max:
            raise ValueError("word_length_min must not exceed word_length_max")
        return self


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, Mapping):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def merge_maps(*maps: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``maps`` left to right; later keys win."""

    merged: dict[str, Any] = {}
    for mapping in maps:
        merged.update(mapping)
    return merged


def _read_package_yaml(name: str) -> dict[str, Any]:
    with (
        importlib_resources.files("wordpass.config")
        .joinpath(name)
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_defaults() -> dict[str, Any]:
    """Return the package default settings as a plain mapping."""

    return _read_package_yaml("defaults.yml")


def preset_names() -> list[str]:
    """Return the sorted preset keys of the built-in catalog."""

    return sorted(_read_package_yaml("presets.yml"))


def get_preset(name: str) -> dict[str, Any]:
    """Return a copy of the preset mapping registered under ``name``.

    Raises
    ------
    UnknownPreset
        If ``name`` is not part of the catalog.
    """

    presets = _read_package_yaml("presets.yml")
    key = name.strip().lower()
    if key not in presets:
        raise UnknownPreset(f"Unknown preset: '{name}'")
    return copy.deepcopy(presets[key] or {})


def _read_user_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    # YAML is a superset of JSON, so one parser covers both formats.
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *overrides: Mapping[str, Any],
    preset: str | None = None,
) -> Settings:
    """Load settings from defaults, a preset and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < preset < user-provided
    YAML/JSON file < ``overrides`` mappings (left to right).  When ``preset``
    is omitted, a ``preset`` key found in the file or overrides selects it.
    """

    layers: list[dict[str, Any]] = []
    if path is not None:
        layers.append(_read_user_file(path))
    layers.extend(dict(o) for o in overrides)

    user = merge_maps(*layers)
    name = preset if preset is not None else user.get("preset")

    merged = load_defaults()
    if name is not None:
        merged = deep_merge_dicts(merged, get_preset(str(name)))
        merged["preset"] = str(name)
    merged = deep_merge_dicts(merged, user)
    if preset is not None:
        merged["preset"] = preset

    return Settings.model_validate(merged)


__all__ = [
    "Settings",
    "deep_merge_dicts",
    "merge_maps",
    "load_defaults",
    "preset_names",
    "get_preset",
    "load_config",
]
