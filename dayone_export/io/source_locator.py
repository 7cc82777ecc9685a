"""Locate the journal document inside an export archive."""

from __future__ import annotations

from ..errors import DocumentNotFound
from .archive import ArchiveContainer


DEFAULT_SOURCE_FILENAME = "journal.json"


def find_source_candidates(
    container: ArchiveContainer, source_filename: str = DEFAULT_SOURCE_FILENAME
) -> list[str]:
    """Return matching member names, best candidate first.

    Names match when they end with `source_filename`, ignoring case. Shorter
    paths rank first; equal lengths keep archive order.
    """

    suffix = source_filename.lower()
    candidates = [name for name in container.list_entries() if name.lower().endswith(suffix)]
    return sorted(candidates, key=len)


def locate_source(
    container: ArchiveContainer, source_filename: str = DEFAULT_SOURCE_FILENAME
) -> tuple[str, str]:
    """Return `(member_name, text)` of the selected journal document.

    Raises:
        DocumentNotFound: If no member name matches `source_filename`.
    """

    candidates = find_source_candidates(container, source_filename)
    if not candidates:
        raise DocumentNotFound(source_filename)
    selected = candidates[0]
    return selected, container.read_text(selected)
