"""Pipeline composition for Typograph.

Responsibilities:
- Compose locale detection, punctuation normalization, and entity encoding.
- Select the output encoding for preview and copy consumers.

Key types:
- `TypographPipeline`: composition facade with optional stage logging.
- `to_unicode` / `to_html`: module-level shortcuts over a default pipeline.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .models.datatypes import Locale, OutputMode, TypographReport
from .telemetry.logger import RunLogger
from .text.entities import EntityEncoder
from .text.locale import detect_locale
from .text.rules import NormalizationReport, PunctuationNormalizer

_StageResult = TypeVar("_StageResult")


class TypographPipeline:
    """Turn raw text into typographically correct Unicode or HTML-entity text."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize optional stage logging."""

        self._run_logger = run_logger
        self._encoder = EntityEncoder()

    def to_unicode(self, text: str) -> str:
        """Return the Unicode-glyph rendering of `text`."""

        return self.render_with_report(text, OutputMode.UNICODE).text

    def to_html(self, text: str) -> str:
        """Return the HTML-entity rendering of `text`."""

        return self.render_with_report(text, OutputMode.HTML).text

    def render(self, text: str, mode: OutputMode) -> str:
        """Return the rendering of `text` for `mode`."""

        return self.render_with_report(text, mode).text

    def render_with_report(self, text: str, mode: OutputMode) -> TypographReport:
        """Render `text` for `mode` and describe what the pipeline did."""

        if not text:
            return TypographReport(text=text, locale=Locale.EN, mode=mode)

        locale = self._run_stage("detect", lambda: detect_locale(text))
        normalized = self._run_stage(
            "normalize",
            lambda: PunctuationNormalizer(locale).normalize_with_report(text),
            locale=locale.value,
        )
        self._log_changed_rules(normalized)

        output = normalized.normalized_text
        if mode is OutputMode.HTML:
            output = self._run_stage("encode", lambda: self._encoder.encode(output))

        return TypographReport(
            text=output,
            locale=locale,
            mode=mode,
            changed_rules=normalized.changed_rules,
        )

    @staticmethod
    def copy_mode(modifier: bool, default: OutputMode = OutputMode.HTML) -> OutputMode:
        """Return the mode a copy action produces; the modifier always selects Unicode."""

        if modifier:
            return OutputMode.UNICODE
        return default

    def _log_changed_rules(self, report: NormalizationReport) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(
                "rules",
                changed=",".join(report.changed_rules) or "none",
            )

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        **context: object,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name, **context)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)
        return result


_DEFAULT_PIPELINE = TypographPipeline()


def to_unicode(text: str) -> str:
    """Return the Unicode-glyph rendering of `text`."""

    return _DEFAULT_PIPELINE.to_unicode(text)


def to_html(text: str) -> str:
    """Return the HTML-entity rendering of `text`."""

    return _DEFAULT_PIPELINE.to_html(text)
