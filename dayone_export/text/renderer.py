"""Render normalized records into one Markdown document."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..models.datatypes import NormalizedRecord


ENTRY_SEPARATOR = "\n\n---\n\n"


def format_timestamp(instant: datetime) -> str:
    """Format an instant as `yyyy-mm-dd hh-mm-ss` in UTC."""

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    value = instant.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}-{value.minute:02d}-{value.second:02d}"
    )


def sort_records(records: Iterable[NormalizedRecord]) -> list[NormalizedRecord]:
    """Sort records by instant, keeping input order among equal instants."""

    return sorted(records, key=lambda record: record.instant)


def render_record(record: NormalizedRecord) -> str:
    """Render one record as a heading block."""

    return f"# {format_timestamp(record.instant)}\n\n{record.body}".strip()


def render_document(records: Sequence[NormalizedRecord]) -> str:
    """Sort and render records, joined by horizontal rules."""

    return ENTRY_SEPARATOR.join(render_record(record) for record in sort_records(records))
