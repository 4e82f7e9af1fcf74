"""Ordered typography rewrite rules.

Responsibilities:
- Provide small, independent `str -> str` rules for punctuation and spacing.
- Assemble them in the order each locale requires and apply them in sequence.

Order matters: dash heuristics run after quote conversion so straight quotes
never look like word boundaries, and digit grouping runs after the Russian
spacing rules have collapsed their whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol

from ..models.datatypes import Locale
from .quotes import RIGHT_SINGLE_QUOTE, QuoteConverter

NBSP = "\u00a0"
EM_DASH = "\u2014"

RU_BOUND_PREPOSITIONS = (
    "в", "к", "с", "у", "о", "и", "а",
    "но", "на", "по", "за", "из", "от", "до", "со", "ко", "об", "обо", "во",
    "для", "без", "при", "над", "под", "про",
)
RU_BOUND_PARTICLES = ("же", "ли", "ль", "бы", "б")


class TypographRule(Protocol):
    """Protocol for ordered typography rules."""

    name: str

    def apply(self, text: str) -> str:
        """Apply a single total rewrite to the whole text."""


class NormalizeLineEndings:
    """Convert CRLF and lone CR line breaks to LF."""

    name = "line-endings"

    def apply(self, text: str) -> str:
        return re.sub(r"\r\n?", "\n", text)


class ConvertQuotes:
    """Replace straight quotes with locale-correct curly quotes."""

    name = "quotes"

    def __init__(self, locale: Locale) -> None:
        self._converter = QuoteConverter(locale)

    def apply(self, text: str) -> str:
        return self._converter.convert(text)


class ReplaceSymbols:
    """Replace `(c)`, `(r)`, `(tm)` and `+/-` with their typographic signs."""

    name = "symbols"

    _SUBSTITUTIONS = (
        (re.compile(r"\(\s*[cс]\s*\)", re.IGNORECASE), "©"),
        (re.compile(r"\(\s*r\s*\)", re.IGNORECASE), "®"),
        (re.compile(r"\(\s*tm\s*\)", re.IGNORECASE), "™"),
        (re.compile(r"\+\s*(?:/\s*)?-\b"), "±"),
    )

    def apply(self, text: str) -> str:
        for pattern, replacement in self._SUBSTITUTIONS:
            text = pattern.sub(replacement, text)
        return text


class PromoteEmDashes:
    """Turn a spaced hyphen between two tokens into a spaced em dash."""

    name = "em-dash"

    _SPACED_HYPHEN_RE = re.compile(r"(\S)\s*-\s+(\S)")
    _DASH_SPACING_RE = re.compile(rf"\s+{EM_DASH}\s*")

    def apply(self, text: str) -> str:
        text = self._SPACED_HYPHEN_RE.sub(rf"\1 {EM_DASH} \2", text)
        return self._DASH_SPACING_RE.sub(f" {EM_DASH} ", text)


class CurlInnerApostrophes:
    """Curl any straight apostrophe left between two letters."""

    name = "apostrophes"

    _INNER_APOSTROPHE_RE = re.compile(r"([^\W\d_])'(?=[^\W\d_])")

    def apply(self, text: str) -> str:
        return self._INNER_APOSTROPHE_RE.sub(rf"\1{RIGHT_SINGLE_QUOTE}", text)


class BindRussianPrepositions:
    """Collapse the spacing after short Russian prepositions and conjunctions."""

    name = "ru-prepositions"

    _PREPOSITION_RE = re.compile(
        r"(?:^|(?<=[\s(\[«„]))(" + "|".join(RU_BOUND_PREPOSITIONS) + r")\s+(?=\S)",
        re.IGNORECASE,
    )

    def apply(self, text: str) -> str:
        return self._PREPOSITION_RE.sub(r"\1 ", text)


class BindRussianParticles:
    """Collapse the spacing before trailing Russian particles."""

    name = "ru-particles"

    _PARTICLE_RE = re.compile(
        r"(\S)\s+(" + "|".join(RU_BOUND_PARTICLES) + r")(?=[\s.,;:!?)]|\Z)",
        re.IGNORECASE,
    )

    def apply(self, text: str) -> str:
        return self._PARTICLE_RE.sub(r"\1 \2", text)


class SpaceYearAbbreviations:
    """Keep exactly one space between a year and `г.`, lowercasing `Г.`."""

    name = "ru-years"

    _YEAR_RE = re.compile(r"(\d{3,4})\s+г\.", re.IGNORECASE)

    def apply(self, text: str) -> str:
        return self._YEAR_RE.sub(r"\1 г.", text)


class SpaceSectionSigns:
    """Keep exactly one space between `§`/`№` and the following number."""

    name = "ru-section-signs"

    def apply(self, text: str) -> str:
        text = re.sub(r"§\s*(\d)", r"§ \1", text)
        return re.sub(r"№\s*(\d)", r"№ \1", text)


class ReplaceNumberAbbreviation:
    """Replace `No.`/`Nо.` before a number with the numero sign."""

    name = "ru-number-sign"

    # ASCII-only boundary: `ДомNo5` still converts.
    _NUMBER_ABBREVIATION_RE = re.compile(r"(?<![A-Za-z0-9_])N[оo]\.?\s*(\d)", re.IGNORECASE)

    def apply(self, text: str) -> str:
        return self._NUMBER_ABBREVIATION_RE.sub(r"№ \1", text)


class GroupDigits:
    """Join three-digit groups of a spaced number with non-breaking spaces."""

    name = "digit-groups"

    _GROUPED_NUMBER_RE = re.compile(rf"\b\d{{1,3}}(?:[ {NBSP}]\d{{3}})+(?!\d)")

    def apply(self, text: str) -> str:
        return self._GROUPED_NUMBER_RE.sub(
            lambda match: re.sub(f"[ {NBSP}]", NBSP, match.group(0)),
            text,
        )


class SpaceCurrencySigns:
    """Keep exactly one space between an amount and its currency sign."""

    name = "currency"

    def apply(self, text: str) -> str:
        return re.sub(r"(\d)\s*([₽€£$])", r"\1 \2", text)


class NormalizeDegrees:
    """Render temperatures as `<number> °C` or `<number> °F`."""

    name = "degrees"

    _DEGREE_RE = re.compile(r"(\d)\s*(?:°|º|deg)\s*([cCfF])")

    def apply(self, text: str) -> str:
        return self._DEGREE_RE.sub(
            lambda match: f"{match.group(1)} °{match.group(2).upper()}",
            text,
        )


class TightenPlusMinus:
    """Remove the space between `±` and the number it qualifies."""

    name = "plus-minus"

    def apply(self, text: str) -> str:
        return re.sub(r"±\s+(\d)", r"±\1", text)


def default_rules(locale: Locale) -> list[TypographRule]:
    """Return the rule sequence for `locale` in application order."""

    rules: list[TypographRule] = [
        NormalizeLineEndings(),
        ConvertQuotes(locale),
        ReplaceSymbols(),
        PromoteEmDashes(),
        CurlInnerApostrophes(),
    ]
    if locale is Locale.RU:
        rules.extend(
            [
                BindRussianPrepositions(),
                BindRussianParticles(),
                SpaceYearAbbreviations(),
                SpaceSectionSigns(),
                ReplaceNumberAbbreviation(),
            ]
        )
    rules.extend(
        [
            GroupDigits(),
            SpaceCurrencySigns(),
            NormalizeDegrees(),
            TightenPlusMinus(),
        ]
    )
    return rules


@dataclass(frozen=True, slots=True)
class NormalizationReport:
    """Structured output of one normalizer run."""

    normalized_text: str
    changed_rules: tuple[str, ...]


class PunctuationNormalizer:
    """Apply an ordered sequence of typography rules."""

    def __init__(self, locale: Locale, rules: list[TypographRule] | None = None) -> None:
        """Initialize with custom rules or the default sequence for `locale`."""

        self.locale = locale
        self.rules = rules if rules is not None else default_rules(locale)

    def normalize_with_report(self, text: str) -> NormalizationReport:
        """Apply all rules and record which of them altered the text."""

        current = text
        changed: list[str] = []
        for rule in self.rules:
            updated = rule.apply(current)
            if updated != current:
                changed.append(rule.name)
            current = updated
        return NormalizationReport(normalized_text=current, changed_rules=tuple(changed))

    def normalize(self, text: str) -> str:
        """Apply all rules in order."""

        return self.normalize_with_report(text).normalized_text
