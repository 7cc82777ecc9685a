"""Core datatypes shared across dayone-export modules.

Responsibilities:
- Represent immutable records exchanged between conversion stages.
- Give the rich-text sub-parse an explicit two-tag result type.

Key types:
- `JournalEntry`, `RichTextContent`, `RichTextUnparseable`,
  `NormalizedRecord`, and `ConversionResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


def _string_field(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True, slots=True)
class JournalEntry:
    """One raw journal entry as found in the export.

    Attributes:
        creation_date: ISO-8601-like creation timestamp, if present.
        modified_date: ISO-8601-like modification timestamp, if present.
        text: Plain entry text, if present.
        rich_text: Serialized rich-text structure, if present.
    """

    creation_date: str | None = None
    modified_date: str | None = None
    text: str | None = None
    rich_text: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> JournalEntry:
        """Build an entry from one raw JSON value, ignoring non-string fields."""

        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            creation_date=_string_field(payload, "creationDate"),
            modified_date=_string_field(payload, "modifiedDate"),
            text=_string_field(payload, "text"),
            rich_text=_string_field(payload, "richText"),
        )


@dataclass(frozen=True, slots=True)
class RichTextContent:
    """Rich text that parsed as structured data.

    Attributes:
        text: Concatenated, trimmed text of all content parts (may be empty).
    """

    text: str


@dataclass(frozen=True, slots=True)
class RichTextUnparseable:
    """Rich text that could not be parsed as structured data."""

    raw: str


RichTextResult = RichTextContent | RichTextUnparseable


@dataclass(frozen=True, slots=True)
class NormalizedRecord:
    """A timestamped entry body ready for rendering.

    Attributes:
        instant: Timezone-aware UTC instant of the entry.
        body: Resolved entry text or the placeholder.
    """

    instant: datetime
    body: str


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of one successful conversion run.

    Attributes:
        markdown: Rendered output document.
        records: Records in rendered (sorted) order.
        entry_count: Number of raw entries in the source document.
        first_timestamp: Header text of the first rendered record.
        last_timestamp: Header text of the last rendered record.
        source_name: File or archive member the document was read from.
    """

    markdown: str
    records: tuple[NormalizedRecord, ...] = field(default_factory=tuple)
    entry_count: int = 0
    first_timestamp: str = ""
    last_timestamp: str = ""
    source_name: str = ""
