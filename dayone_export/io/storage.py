"""Output document storage.

Responsibilities:
- Derive the dated download filename for a converted document.
- Write rendered Markdown under an output directory.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path


def output_filename(app_name: str, now: datetime | None = None) -> str:
    """Return `<app_name>-<yyyy-mm-dd>.md` using the UTC date of `now`."""

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{app_name}-{moment.year:04d}-{moment.month:02d}-{moment.day:02d}.md"


class OutputStore:
    """Filesystem-backed store for converted documents."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def save_document(self, markdown: str, app_name: str, now: datetime | None = None) -> Path:
        """Save a rendered document under its dated filename."""

        return self.save_text(Path(output_filename(app_name, now)), markdown)
