"""HTML entity encoding for typographic characters."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ENTITY_TABLE = MappingProxyType(
    {
        "\u00a0": "&nbsp;",
        "\u2014": "&mdash;",
        "\u2013": "&ndash;",
        "«": "&laquo;",
        "»": "&raquo;",
        # No named HTML4 entity exists for the low double quote.
        "„": "&#132;",
        "“": "&#147;",
        "”": "&#148;",
        "’": "&#146;",
    }
)


class EntityEncoder:
    """Rewrite a fixed set of typographic code points as HTML entities."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        """Initialize with a custom entity table or the default one."""

        self.table = table if table is not None else ENTITY_TABLE

    def encode(self, text: str) -> str:
        """Return `text` with mapped code points replaced and everything else untouched."""

        return "".join(self.table.get(character, character) for character in text)
