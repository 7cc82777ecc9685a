"""Input/output adapters for archives, source lookup, and output files."""

from .archive import ArchiveContainer, ZipArchiveContainer
from .source_locator import find_source_candidates, locate_source
from .storage import OutputStore, output_filename

__all__ = [
    "ArchiveContainer",
    "OutputStore",
    "ZipArchiveContainer",
    "find_source_candidates",
    "locate_source",
    "output_filename",
]
