"""Generation pipeline services and their protocols."""

from .base import (
    PaddingService,
    RandomService,
    SeparatorService,
    TransformerService,
    WordListService,
)
from .generator import GeneratorService
from .padding import DefaultPaddingService
from .rng import SecureRandomService
from .separator import DefaultSeparatorService
from .transformer import DefaultTransformerService
from .word_list import DefaultWordListService

__all__ = [
    "DefaultPaddingService",
    "DefaultSeparatorService",
    "DefaultTransformerService",
    "DefaultWordListService",
    "GeneratorService",
    "PaddingService",
    "RandomService",
    "SecureRandomService",
    "SeparatorService",
    "TransformerService",
    "WordListService",
]
