"""Typography building blocks.

This package provides locale detection, quote conversion, ordered punctuation
rules, and HTML entity encoding used by the pipeline.
"""

from .entities import ENTITY_TABLE, EntityEncoder
from .locale import detect_locale
from .quotes import QuoteConverter, is_opening_quote
from .rules import (
    NormalizationReport,
    PunctuationNormalizer,
    TypographRule,
    default_rules,
)

__all__ = [
    "ENTITY_TABLE",
    "EntityEncoder",
    "NormalizationReport",
    "PunctuationNormalizer",
    "QuoteConverter",
    "TypographRule",
    "default_rules",
    "detect_locale",
    "is_opening_quote",
]
