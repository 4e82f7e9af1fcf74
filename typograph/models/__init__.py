"""Domain datatypes for Typograph."""

from .datatypes import (
    Locale,
    OutputMode,
    QuoteConversionReport,
    QuoteGlyphs,
    TypographReport,
)

__all__ = [
    "Locale",
    "OutputMode",
    "QuoteConversionReport",
    "QuoteGlyphs",
    "TypographReport",
]
