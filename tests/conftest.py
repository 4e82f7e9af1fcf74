"""Shared pytest fixtures for the full Typograph test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _isolate_typograph_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop `TYPOGRAPH_*` variables so host settings never leak into tests."""

    for key in ("TYPOGRAPH_DEFAULT_MODE", "TYPOGRAPH_DEBUG", "TYPOGRAPH_CLIPBOARD_COMMAND"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Remove handlers bound to per-test streams once each test finishes."""

    yield
    logger.remove()
