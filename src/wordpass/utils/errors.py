"""Typed exceptions for configuration, randomness and word-list failures."""


class PassphraseError(Exception):
    """Base class for every error raised by the package."""


class InvalidConfiguration(PassphraseError, ValueError):
    """Raised when a settings field is out of range or malformed."""


class EmptyAlphabet(InvalidConfiguration):
    """Raised when a random character is requested from an empty alphabet."""


class UnsupportedMode(InvalidConfiguration):
    """Raised for an unknown case-transform or padding mode."""


class InvalidMode(UnsupportedMode):
    """Raised when the padding type is not one of the known variants."""


class InvalidCount(InvalidConfiguration):
    """Raised when the number of requested passwords is outside ``[1, 10]``."""


class UnknownPreset(InvalidConfiguration):
    """Raised when a preset key has no entry in the preset catalog."""


class RandomError(PassphraseError):
    """Base class for random number service errors."""


class InvalidRange(RandomError, ValueError):
    """Raised when an upper bound is not strictly positive."""


class InvalidLength(RandomError, ValueError):
    """Raised when a negative sequence length is requested."""


class RandomFailure(RandomError):
    """Raised when the secure entropy source cannot provide bytes."""


class WordListError(PassphraseError):
    """Base class for word-list resolution failures."""


class UnknownWordList(WordListError):
    """Raised when a word-list identifier is not registered."""


class SourceUnavailable(WordListError):
    """Raised when a registered word-list resource cannot be read."""


class MalformedSource(WordListError):
    """Raised when a word-list resource cannot be decoded."""


class EmptyWordList(WordListError):
    """Raised when length filtering leaves no candidate words."""
