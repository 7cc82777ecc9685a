"""Shared pytest fixtures for the full dayone-export test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable
import zipfile

import pytest


class InMemoryArchive:
    """Archive container backed by an ordered name/text mapping."""

    def __init__(self, members: dict[str, str]) -> None:
        self.members = dict(members)
        self.reads: list[str] = []

    def list_entries(self) -> list[str]:
        return list(self.members)

    def read_text(self, name: str) -> str:
        self.reads.append(name)
        return self.members[name]


@pytest.fixture
def journal_payload() -> Callable[..., str]:
    """Provide a serializer for Day One `Journal.json` documents."""

    def _journal_payload(*entries: object) -> str:
        return json.dumps({"metadata": {"version": "1.0"}, "entries": list(entries)})

    return _journal_payload


@pytest.fixture
def in_memory_archive() -> Callable[[dict[str, str]], InMemoryArchive]:
    """Provide a factory for in-memory archive containers."""

    return InMemoryArchive


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory writing a zip export with the given members."""

    def _make_zip(members: dict[str, str], name: str = "export.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for member_name, content in members.items():
                archive.writestr(member_name, content)
        return path

    return _make_zip


@pytest.fixture
def sample_entries() -> list[dict[str, object]]:
    """Provide a small out-of-order entry list covering every body source."""

    return [
        {
            "creationDate": "2023-05-02T08:00:00Z",
            "text": "Second day\\. Felt well\\-rested.",
        },
        {
            "creationDate": "2023-05-01T14:03:09Z",
            "text": "",
            "richText": json.dumps({"contents": [{"text": "Hello"}, {"text": " world"}]}),
        },
        {"modifiedDate": "2023-05-03T09:30:00Z", "text": "  Only modified  "},
    ]
