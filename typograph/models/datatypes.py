"""Core datatypes shared across Typograph modules.

Responsibilities:
- Represent the locale and output-mode variants used to dispatch rules.
- Provide immutable report records exchanged between pipeline stages.

Key types:
- `Locale`, `QuoteGlyphs`, `OutputMode`, `QuoteConversionReport`,
  and `TypographReport`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class QuoteGlyphs:
    """Curly quote marks used by one locale.

    Attributes:
        open_primary: Opening mark for an outermost double quotation.
        open_secondary: Opening mark for a nested double quotation.
        close_primary: Closing mark for an outermost double quotation.
        close_secondary: Closing mark for a nested double quotation.
        single_open: Opening mark for a straight single quote.
        single_close: Closing mark for a straight single quote.
    """

    open_primary: str
    open_secondary: str
    close_primary: str
    close_secondary: str
    single_open: str
    single_close: str


_GLYPHS_BY_LOCALE = {
    "ru": QuoteGlyphs(
        open_primary="«",
        open_secondary="„",
        close_primary="»",
        close_secondary="“",
        single_open="„",
        single_close="“",
    ),
    "en": QuoteGlyphs(
        open_primary="“",
        open_secondary="‘",
        close_primary="”",
        close_secondary="’",
        single_open="‘",
        single_close="’",
    ),
}


class Locale(Enum):
    """Script-driven locale selecting quote glyphs and spacing rules."""

    RU = "ru"
    EN = "en"

    @property
    def glyphs(self) -> QuoteGlyphs:
        """Return the quote glyph table for this locale."""

        return _GLYPHS_BY_LOCALE[self.value]


class OutputMode(Enum):
    """Output encoding produced by the pipeline."""

    UNICODE = "unicode"
    HTML = "html"


@dataclass(frozen=True, slots=True)
class QuoteConversionReport:
    """Structured output of one quote conversion scan.

    Attributes:
        converted_text: Text with straight quotes replaced by curly marks.
        final_depth: Double-quote nest depth after the last code point.
        depth_trace: Nest depth after each scanned code point.
    """

    converted_text: str
    final_depth: int
    depth_trace: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class TypographReport:
    """Structured output of a full pipeline invocation.

    Attributes:
        text: Rendered output text.
        locale: Locale detected for the input.
        mode: Output encoding that was produced.
        changed_rules: Names of rules that altered the text, in order applied.
    """

    text: str
    locale: Locale
    mode: OutputMode
    changed_rules: tuple[str, ...] = ()
