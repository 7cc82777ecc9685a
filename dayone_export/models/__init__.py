"""Shared typed data models for dayone-export.

This package contains dataclasses used across conversion modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    ConversionResult,
    JournalEntry,
    NormalizedRecord,
    RichTextContent,
    RichTextResult,
    RichTextUnparseable,
)

__all__ = [
    "ConversionResult",
    "JournalEntry",
    "NormalizedRecord",
    "RichTextContent",
    "RichTextResult",
    "RichTextUnparseable",
]
