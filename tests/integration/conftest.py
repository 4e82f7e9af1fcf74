"""Integration-test fixtures for deterministic clipboard behavior."""

from __future__ import annotations

import pytest


class RecordingClipboard:
    """Stand-in clipboard writer that records payloads instead of running tools."""

    instances: list["RecordingClipboard"] = []
    succeed = True

    def __init__(self, command: str | None = None, platform: str | None = None) -> None:
        self.command = command
        self.platform = platform
        self.payloads: list[str] = []
        RecordingClipboard.instances.append(self)

    def write(self, text: str) -> bool:
        """Record `text` and answer with the configured outcome."""

        self.payloads.append(text)
        return RecordingClipboard.succeed


@pytest.fixture(autouse=True)
def recording_clipboard(monkeypatch: pytest.MonkeyPatch) -> type[RecordingClipboard]:
    """Replace the CLI clipboard writer so tests never touch the host clipboard."""

    RecordingClipboard.instances = []
    RecordingClipboard.succeed = True
    monkeypatch.setattr("typograph.cli.ClipboardWriter", RecordingClipboard)
    return RecordingClipboard
