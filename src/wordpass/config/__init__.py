"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. A preset from ``presets.yml`` selected by name
    3. Optional user-provided YAML or JSON passed to :func:`load_config`
    4. Override mappings passed to :func:`load_config`
"""

from .options import (
    ALLOWED_CHARACTERS,
    DEFAULT_SPECIAL_CHARACTERS,
    RANDOM,
    CaseTransform,
    PaddingType,
)
from .schema import (
    Settings,
    deep_merge_dicts,
    get_preset,
    load_config,
    load_defaults,
    merge_maps,
    preset_names,
)

__all__ = [
    "ALLOWED_CHARACTERS",
    "DEFAULT_SPECIAL_CHARACTERS",
    "RANDOM",
    "CaseTransform",
    "PaddingType",
    "Settings",
    "deep_merge_dicts",
    "get_preset",
    "load_config",
    "load_defaults",
    "merge_maps",
    "preset_names",
]
