import pytest

from wordpass.utils.errors import EmptyAlphabet, InvalidConfiguration
from wordpass.utils.validators import (
    has_element_longer_than_one,
    has_digit,
    is_element_in,
    validate_alphabet,
    validate_separator_alphabet,
)


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], False),
        (["a", "b"], False),
        (["", "!"], False),
        (["a", "bb"], True),
        (("aaa",), True),
    ],
)
def test_has_element_longer_than_one(items: list[str], expected: bool) -> None:
    assert has_element_longer_than_one(items) is expected


def test_is_element_in() -> None:
    assert is_element_in(["-", "+"], "+")
    assert is_element_in(frozenset({"#", ","}), ",")
    assert not is_element_in(["-", "+"], "=")
    assert not is_element_in([], "-")


def test_validate_alphabet() -> None:
    validate_alphabet(("!", "?"), "symbol_alphabet")
    with pytest.raises(EmptyAlphabet, match="symbol_alphabet"):
        validate_alphabet((), "symbol_alphabet")
    with pytest.raises(InvalidConfiguration):
        validate_alphabet(("!", "??"), "symbol_alphabet")


def test_has_digit() -> None:
    assert has_digit(["-", "3"])
    assert not has_digit(["-", "", "+"])
    assert not has_digit([])


def test_validate_separator_alphabet() -> None:
    validate_separator_alphabet(("-", "+"))
    with pytest.raises(EmptyAlphabet):
        validate_separator_alphabet(())
    with pytest.raises(InvalidConfiguration, match="digits"):
        validate_separator_alphabet(("-", "0"))
