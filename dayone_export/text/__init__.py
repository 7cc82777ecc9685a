"""Text normalization and rendering components.

This package turns raw journal entries into timestamped records and renders
them into the final Markdown document.
"""

from .cleaners import TextCleaner, UnescapePunctuation
from .normalizer import EPOCH_SENTINEL, NO_CONTENT_PLACEHOLDER, EntryNormalizer
from .renderer import format_timestamp, render_document, sort_records
from .rich_text import parse_rich_text

__all__ = [
    "EPOCH_SENTINEL",
    "NO_CONTENT_PLACEHOLDER",
    "EntryNormalizer",
    "TextCleaner",
    "UnescapePunctuation",
    "format_timestamp",
    "parse_rich_text",
    "render_document",
    "sort_records",
]
