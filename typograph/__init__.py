"""Top-level package for Typograph.

This package turns raw plain text into typographically correct Russian or
English text, either as Unicode glyphs or as HTML entities. The main entry
point is `TypographPipeline`; `to_unicode` and `to_html` are shortcuts.
"""

from .models.datatypes import Locale, OutputMode
from .pipeline import TypographPipeline, to_html, to_unicode

__all__ = [
    "Locale",
    "OutputMode",
    "TypographPipeline",
    "__version__",
    "to_html",
    "to_unicode",
]

__version__ = "0.2.0"
