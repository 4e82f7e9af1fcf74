"""Script-based locale detection."""

from __future__ import annotations

import re

from ..models.datatypes import Locale

_CYRILLIC_RE = re.compile("[\u0400-\u04FF]")


def detect_locale(text: str) -> Locale:
    """Return `Locale.RU` when any Cyrillic code point is present, else `Locale.EN`."""

    if _CYRILLIC_RE.search(text):
        return Locale.RU
    return Locale.EN
