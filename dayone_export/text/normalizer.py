"""Entry normalization for Day One exports.

Responsibilities:
- Resolve one instant and one body for every raw entry.
- Never fail on a single malformed entry; fall back to the epoch sentinel
  and the placeholder body instead.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from ..models.datatypes import JournalEntry, NormalizedRecord, RichTextUnparseable
from ..parsing import parse_iso_timestamp
from .cleaners import TextCleaner
from .rich_text import parse_rich_text


EPOCH_SENTINEL = datetime(1970, 1, 1, tzinfo=timezone.utc)
NO_CONTENT_PLACEHOLDER = "[No content]"


class EntryNormalizer:
    """Map raw journal entries to `NormalizedRecord` values one-to-one."""

    def __init__(
        self,
        cleaner: TextCleaner | None = None,
        placeholder: str = NO_CONTENT_PLACEHOLDER,
    ) -> None:
        self.cleaner = cleaner or TextCleaner()
        self.placeholder = placeholder

    def normalize(self, entries: Iterable[JournalEntry]) -> list[NormalizedRecord]:
        """Normalize entries in input order."""

        return [self.normalize_entry(entry) for entry in entries]

    def normalize_entry(self, entry: JournalEntry) -> NormalizedRecord:
        """Normalize a single entry."""

        return NormalizedRecord(
            instant=self.resolve_instant(entry),
            body=self.resolve_body(entry),
        )

    def resolve_instant(self, entry: JournalEntry) -> datetime:
        """Return creation date, else modified date, else the epoch sentinel."""

        for candidate in (entry.creation_date, entry.modified_date):
            parsed = parse_iso_timestamp(candidate)
            if parsed is not None:
                return parsed
        return EPOCH_SENTINEL

    def resolve_body(self, entry: JournalEntry) -> str:
        """Return cleaned plain text, else cleaned rich text, else the placeholder."""

        text = (entry.text or "").strip()
        if text:
            return self.cleaner.clean(text)

        if entry.rich_text is None or not entry.rich_text.strip():
            return self.placeholder

        rich = parse_rich_text(entry.rich_text)
        if isinstance(rich, RichTextUnparseable) or not rich.text:
            return self.placeholder
        return self.cleaner.clean(rich.text)
