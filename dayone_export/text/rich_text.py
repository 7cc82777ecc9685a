"""Parse Day One `richText` payloads into a tagged result."""

from __future__ import annotations

import json

from ..models.datatypes import RichTextContent, RichTextResult, RichTextUnparseable


def parse_rich_text(raw: str) -> RichTextResult:
    """Concatenate the `text` of every content part in `raw`.

    Parts without a string `text` contribute nothing. A payload that parses
    but has no `contents` list yields empty content.
    """

    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        return RichTextUnparseable(raw=raw)

    contents = payload.get("contents") if isinstance(payload, dict) else None
    if not isinstance(contents, list):
        return RichTextContent(text="")

    chunks = [
        part["text"]
        for part in contents
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    return RichTextContent(text="".join(chunks).strip())
