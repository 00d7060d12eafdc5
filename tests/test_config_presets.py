from pathlib import Path

import pytest

from wordpass.config import CaseTransform, PaddingType, get_preset, load_config, preset_names
from wordpass.utils.errors import InvalidConfiguration, UnknownPreset


def test_preset_catalog() -> None:
    assert preset_names() == ["appleid", "default", "ntlm", "web16", "web32", "wifi", "xkcd"]


def test_appleid_preset() -> None:
    cfg = load_config(preset="appleid")
    assert cfg.preset == "appleid"
    assert (cfg.word_length_min, cfg.word_length_max) == (5, 7)
    assert cfg.separator_alphabet == ("-", ":", ".", ",")
    assert cfg.symbol_alphabet == ("!", "?", "@", "&")
    assert cfg.padding_characters_before == cfg.padding_characters_after == 1


def test_xkcd_preset() -> None:
    cfg = load_config(preset="XKCD")
    assert cfg.preset == "xkcd"
    assert cfg.num_words == 4
    assert cfg.separator_character == "-"
    assert cfg.padding_type is PaddingType.NONE
    assert cfg.padding_digits_before == cfg.padding_digits_after == 0


def test_wifi_preset_is_adaptive() -> None:
    cfg = load_config(preset="wifi")
    assert cfg.padding_type is PaddingType.ADAPTIVE
    assert cfg.pad_to_length == 63


def test_preset_selected_through_overrides() -> None:
    cfg = load_config(None, {"preset": "ntlm"})
    assert cfg.preset == "ntlm"
    assert cfg.case_transform is CaseTransform.INVERT


def test_preset_selected_through_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("preset: web32\nnum_passwords: 1\n")
    cfg = load_config(cfg_file)
    assert cfg.case_transform is CaseTransform.ALTERNATE
    assert cfg.num_passwords == 1


def test_unknown_preset() -> None:
    with pytest.raises(UnknownPreset, match="nope"):
        load_config(preset="nope")
    assert issubclass(UnknownPreset, InvalidConfiguration)


def test_get_preset_returns_copy() -> None:
    first = get_preset("appleid")
    first["separator_alphabet"].append("+")
    assert get_preset("appleid")["separator_alphabet"] == ["-", ":", ".", ","]
