"""End-to-end converter tests against real files and zip archives."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Callable

import pytest

from dayone_export.errors import (
    DocumentNotFound,
    EmptyEntryList,
    EmptyRenderedOutput,
    InputNotFound,
    MalformedDocument,
    UnsupportedFileType,
)
from dayone_export.models.datatypes import NormalizedRecord
from dayone_export.pipeline import JournalConverter
from dayone_export.session import STATUS_ERROR, STATUS_SUCCESS, ConversionSession
from dayone_export.telemetry.logger import RunLogger


EXPECTED_SAMPLE_MARKDOWN = (
    "# 2023-05-01 14-03-09\n\nHello world"
    "\n\n---\n\n"
    "# 2023-05-02 08-00-00\n\nSecond day. Felt well-rested."
    "\n\n---\n\n"
    "# 2023-05-03 09-30-00\n\nOnly modified"
)


def test_convert_json_file_renders_sorted_document(
    tmp_path: Path, journal_payload: Callable[..., str], sample_entries: list
) -> None:
    path = tmp_path / "Journal.json"
    path.write_text(journal_payload(*sample_entries), encoding="utf-8")

    result = JournalConverter().convert(path)

    assert result.markdown == EXPECTED_SAMPLE_MARKDOWN
    assert result.entry_count == 3
    assert result.first_timestamp == "2023-05-01 14-03-09"
    assert result.last_timestamp == "2023-05-03 09-30-00"
    assert result.source_name == "Journal.json"


def test_convert_zip_selects_top_level_journal(
    make_zip: Callable[..., Path], journal_payload: Callable[..., str], sample_entries: list
) -> None:
    path = make_zip(
        {
            "Export/Journal.json": journal_payload({"text": "nested copy"}),
            "Journal.json": journal_payload(*sample_entries),
            "photos/3F2A.jpeg": "binary",
        },
        name="Export.ZIP",
    )

    result = JournalConverter().convert(path)

    assert result.source_name == "Journal.json"
    assert result.markdown == EXPECTED_SAMPLE_MARKDOWN


def test_convert_accepts_utf8_bom(tmp_path: Path, journal_payload: Callable[..., str]) -> None:
    path = tmp_path / "Journal.json"
    path.write_bytes(b"\xef\xbb\xbf" + journal_payload({"text": "Café"}).encode("utf-8"))

    result = JournalConverter().convert(path)

    assert result.markdown == "# 1970-01-01 00-00-00\n\nCafé"


def test_missing_timestamps_sort_first_in_input_order(
    tmp_path: Path, journal_payload: Callable[..., str]
) -> None:
    path = tmp_path / "journal.json"
    path.write_text(
        journal_payload(
            {"creationDate": "2023-05-01T14:03:09Z", "text": "dated"},
            {"text": "undated one"},
            "not an entry",
            {"creationDate": "bogus", "richText": "not-json", "text": ""},
        ),
        encoding="utf-8",
    )

    result = JournalConverter().convert(path)

    assert result.entry_count == 4
    assert [record.body for record in result.records] == [
        "undated one",
        "[No content]",
        "[No content]",
        "dated",
    ]
    assert result.markdown.startswith("# 1970-01-01 00-00-00\n\nundated one\n\n---\n\n")
    assert result.first_timestamp == "1970-01-01 00-00-00"


def test_unsupported_suffix_is_rejected_before_reading(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"

    with pytest.raises(UnsupportedFileType):
        JournalConverter().convert(path)


def test_missing_input_is_reported(tmp_path: Path) -> None:
    with pytest.raises(InputNotFound):
        JournalConverter().convert(tmp_path / "absent.zip")


def test_zip_without_journal_raises_document_not_found(make_zip: Callable[..., Path]) -> None:
    path = make_zip({"photos/a.jpeg": "x", "readme.txt": "hi"})

    with pytest.raises(DocumentNotFound):
        JournalConverter().convert(path)


@pytest.mark.parametrize("payload", ["{not json", ""])
def test_invalid_json_raises_malformed_document(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "Journal.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(MalformedDocument, match="Invalid JSON in `Journal.json`"):
        JournalConverter().convert(path)


def test_corrupt_zip_raises_malformed_document(tmp_path: Path) -> None:
    path = tmp_path / "export.zip"
    path.write_bytes(b"definitely not a zip")

    with pytest.raises(MalformedDocument, match="Could not open zip export"):
        JournalConverter().convert(path)


def test_deeply_nested_json_raises_malformed_document(tmp_path: Path) -> None:
    path = tmp_path / "Journal.json"
    path.write_text('{"entries": ' + "[" * 200_000, encoding="utf-8")

    with pytest.raises(MalformedDocument, match="Invalid JSON in `Journal.json`"):
        JournalConverter().convert(path)


def _patch_central_directory(path: Path, offset: int, value: int) -> None:
    data = bytearray(path.read_bytes())
    header = data.rfind(b"PK\x01\x02")
    data[header + offset : header + offset + 2] = value.to_bytes(2, "little")
    path.write_bytes(bytes(data))


@pytest.mark.parametrize(
    ("offset", "value"),
    [(10, 99), (8, 1)],
    ids=["unsupported-compression", "encrypted-member"],
)
def test_unreadable_zip_member_raises_malformed_document_and_clears_session(
    make_zip: Callable[..., Path],
    journal_payload: Callable[..., str],
    offset: int,
    value: int,
) -> None:
    path = make_zip({"Journal.json": journal_payload({"text": "locked"})})
    _patch_central_directory(path, offset, value)

    with pytest.raises(MalformedDocument, match="Could not read journal document"):
        JournalConverter().convert(path)

    session = JournalConverter().run(path, ConversionSession(output="stale"))

    assert session.status == STATUS_ERROR
    assert session.output == ""
    assert isinstance(session.error, MalformedDocument)


@pytest.mark.parametrize(
    "document",
    [{"entries": []}, {"entries": "nope"}, {"metadata": {}}, ["entries"]],
)
def test_documents_without_entries_raise_empty_entry_list(
    tmp_path: Path, document: object
) -> None:
    path = tmp_path / "Journal.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(EmptyEntryList, match="No entries found in Journal.json"):
        JournalConverter().convert(path)


def test_whitespace_only_render_raises_empty_rendered_output(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("dayone_export.pipeline.render_document", lambda records: " \n ")

    with pytest.raises(EmptyRenderedOutput):
        JournalConverter().convert_document({"entries": [{"text": "x"}]})


def test_run_returns_success_session(
    tmp_path: Path, journal_payload: Callable[..., str], sample_entries: list
) -> None:
    path = tmp_path / "Journal.json"
    path.write_text(journal_payload(*sample_entries), encoding="utf-8")

    session = JournalConverter().run(path)

    assert session.status == STATUS_SUCCESS
    assert session.output == EXPECTED_SAMPLE_MARKDOWN
    assert session.message == "Done. 3 entries converted."


def test_run_failure_clears_previous_output(
    tmp_path: Path, journal_payload: Callable[..., str], sample_entries: list
) -> None:
    good = tmp_path / "Journal.json"
    good.write_text(journal_payload(*sample_entries), encoding="utf-8")
    converter = JournalConverter()

    session = converter.run(good)
    session = converter.run(tmp_path / "notes.txt", session)

    assert session.status == STATUS_ERROR
    assert session.output == ""
    assert isinstance(session.error, UnsupportedFileType)
    assert "Unsupported file type" in session.message


def test_run_accepts_explicit_session(tmp_path: Path) -> None:
    path = tmp_path / "Journal.json"
    path.write_text('{"entries": []}', encoding="utf-8")

    session = JournalConverter().run(path, ConversionSession())

    assert isinstance(session.error, EmptyEntryList)


def test_converter_logs_stage_events(
    make_zip: Callable[..., Path], journal_payload: Callable[..., str]
) -> None:
    sink = io.StringIO()
    path = make_zip({"Journal.json": journal_payload({"text": "secret words"})})

    JournalConverter(run_logger=RunLogger(sink=sink)).convert(path)

    lines = sink.getvalue().splitlines()
    assert lines[0] == "[phase] level=INFO stage=input event=start suffix=.zip"
    assert "[phase] level=INFO stage=locate event=complete" in lines
    assert "[phase] level=INFO stage=normalize event=start entries=1" in lines
    assert lines[-1] == "[phase] level=INFO stage=render event=complete"
    assert "secret" not in sink.getvalue()


def test_converter_logs_failure_stage(tmp_path: Path) -> None:
    sink = io.StringIO()

    with pytest.raises(UnsupportedFileType):
        JournalConverter(run_logger=RunLogger(sink=sink)).convert(tmp_path / "notes.txt")

    assert sink.getvalue().splitlines()[-1] == (
        "[phase] level=ERROR stage=input event=failure error_type=UnsupportedFileType"
    )


def test_normalized_records_expose_sorted_instants(
    tmp_path: Path, journal_payload: Callable[..., str], sample_entries: list
) -> None:
    path = tmp_path / "Journal.json"
    path.write_text(journal_payload(*sample_entries), encoding="utf-8")

    records = JournalConverter().convert(path).records

    assert all(isinstance(record, NormalizedRecord) for record in records)
    assert [record.instant for record in records] == sorted(record.instant for record in records)
