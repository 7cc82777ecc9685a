"""Top-level package for dayone-export.

This package converts a Day One JSON export (`.zip` archive or bare
`Journal.json`) into one chronologically ordered Markdown document. The main
entry point is `JournalConverter`.
"""

from .pipeline import JournalConverter
from .session import ConversionSession

__all__ = ["ConversionSession", "JournalConverter", "__version__"]

__version__ = "0.1.0"
