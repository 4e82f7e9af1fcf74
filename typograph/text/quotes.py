"""Straight-to-curly quote conversion.

Responsibilities:
- Classify each straight quote as opening or closing from its neighbours.
- Track double-quote nesting to choose primary or secondary glyphs.

The scan is a left fold over code points carrying `(depth, output)`. Nothing
survives between calls, so one converter can be reused freely.
"""

from __future__ import annotations

from ..models.datatypes import Locale, QuoteConversionReport

RIGHT_SINGLE_QUOTE = "\u2019"

_OPENING_CONTEXT = frozenset("([{<«„—")
_CLOSING_CONTEXT = frozenset(")]}>.,!?:;»”")


def _previous_non_space(text: str, index: int) -> str:
    """Return the nearest non-whitespace character before `index`, or an empty string."""

    for position in range(index - 1, -1, -1):
        if not text[position].isspace():
            return text[position]
    return ""


def _next_non_space(text: str, index: int) -> str:
    """Return the nearest non-whitespace character after `index`, or an empty string."""

    for position in range(index + 1, len(text)):
        if not text[position].isspace():
            return text[position]
    return ""


def is_opening_quote(text: str, index: int) -> bool:
    """Return whether the quote at `index` opens a quotation.

    Checks run in a fixed order; the first one that applies decides.
    """

    previous = _previous_non_space(text, index)
    following = _next_non_space(text, index)
    if not previous:
        return True
    if not following:
        return False
    if text[index - 1].isspace() or previous in _OPENING_CONTEXT:
        return True
    if text[index + 1].isspace() or following in _CLOSING_CONTEXT:
        return False
    return not previous.isalnum()


def _is_inner_apostrophe(text: str, index: int) -> bool:
    """Return whether a single quote sits directly between two letters."""

    if index == 0 or index + 1 >= len(text):
        return False
    return text[index - 1].isalpha() and text[index + 1].isalpha()


class QuoteConverter:
    """Convert ASCII `"` and `'` into locale-correct curly quotes."""

    def __init__(self, locale: Locale) -> None:
        """Bind the converter to the glyph table of one locale."""

        self.locale = locale

    def convert(self, text: str) -> str:
        """Return `text` with straight quotes replaced."""

        return self.convert_with_report(text).converted_text

    def convert_with_report(self, text: str) -> QuoteConversionReport:
        """Convert quotes and return the output together with depth diagnostics."""

        depth = 0
        output: list[str] = []
        depth_trace: list[int] = []
        for index, character in enumerate(text):
            piece, depth = self._step(text, index, character, depth)
            output.append(piece)
            depth_trace.append(depth)
        return QuoteConversionReport(
            converted_text="".join(output),
            final_depth=depth,
            depth_trace=tuple(depth_trace),
        )

    def _step(self, text: str, index: int, character: str, depth: int) -> tuple[str, int]:
        """Emit the replacement for one code point and the depth that follows it."""

        glyphs = self.locale.glyphs
        if character == '"':
            if is_opening_quote(text, index):
                mark = glyphs.open_primary if depth == 0 else glyphs.open_secondary
                return mark, depth + 1
            mark = glyphs.close_primary if depth <= 1 else glyphs.close_secondary
            return mark, max(0, depth - 1)

        if character == "'":
            if _is_inner_apostrophe(text, index):
                return RIGHT_SINGLE_QUOTE, depth
            if is_opening_quote(text, index):
                return glyphs.single_open, depth
            return glyphs.single_close, depth

        return character, depth
