"""Archive container abstraction.

Responsibilities:
- Describe the minimal capability the source locator needs from an archive.
- Provide a `zipfile`-backed implementation for Day One `.zip` exports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol
import zipfile


class ArchiveContainer(Protocol):
    """Protocol for archives of named text streams."""

    def list_entries(self) -> list[str]:
        """Return stream names in source enumeration order."""

    def read_text(self, name: str) -> str:
        """Return decoded stream content, raising `KeyError` for unknown names."""


class ZipArchiveContainer:
    """Read-only view over an opened zip archive.

    Directory members are not listed. Use as a context manager so the
    underlying file handle is closed once the source text has been read.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        """Open the archive at `path`; raises `zipfile.BadZipFile` on invalid input."""

        self.path = path
        self.encoding = encoding
        self._zip = zipfile.ZipFile(path)

    def __enter__(self) -> ZipArchiveContainer:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the archive file handle."""

        self._zip.close()

    def list_entries(self) -> list[str]:
        """Return file member names in archive order."""

        return [info.filename for info in self._zip.infolist() if not info.is_dir()]

    def read_text(self, name: str) -> str:
        """Read and decode one archive member."""

        return self._zip.read(name).decode(self.encoding)
