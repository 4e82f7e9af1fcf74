"""Domain exceptions for CLI diagnostics.

The typography transforms themselves never raise; these errors cover the
surrounding input, configuration, and output stages.
"""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
