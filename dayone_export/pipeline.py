"""Conversion orchestration for dayone-export.

Responsibilities:
- Decide how to read the input (`.json` directly, `.zip` via the source locator).
- Run parse, normalize, and render stages with stage-scoped errors.
- Fold the outcome into an explicit `ConversionSession`.

Key types:
- `JournalConverter`: orchestration facade.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar
import zipfile
import zlib

from .config import ConverterConfig
from .errors import (
    ConversionError,
    EmptyEntryList,
    EmptyRenderedOutput,
    InputNotFound,
    MalformedDocument,
    UnsupportedFileType,
)
from .io.archive import ZipArchiveContainer
from .io.source_locator import DEFAULT_SOURCE_FILENAME, locate_source
from .models.datatypes import ConversionResult, JournalEntry, NormalizedRecord
from .session import ConversionSession
from .telemetry.logger import RunLogger
from .text.normalizer import NO_CONTENT_PLACEHOLDER, EntryNormalizer
from .text.renderer import format_timestamp, render_document, sort_records


_SOURCE_ENCODING = "utf-8-sig"
_T = TypeVar("_T")


class JournalConverter:
    """Convert one Day One export into a single Markdown document."""

    def __init__(
        self,
        source_filename: str = DEFAULT_SOURCE_FILENAME,
        placeholder: str = NO_CONTENT_PLACEHOLDER,
        run_logger: RunLogger | None = None,
    ) -> None:
        self.source_filename = source_filename
        self.normalizer = EntryNormalizer(placeholder=placeholder)
        self._run_logger = run_logger

    @classmethod
    def from_config(
        cls, config: ConverterConfig, run_logger: RunLogger | None = None
    ) -> JournalConverter:
        """Build a converter from validated settings."""

        return cls(
            source_filename=config.source_filename,
            placeholder=config.placeholder,
            run_logger=run_logger,
        )

    def run(self, path: Path, session: ConversionSession | None = None) -> ConversionSession:
        """Convert `path` and return the next session state.

        Conversion errors end in a failed session with the output cleared.
        """

        current = (session or ConversionSession()).processing()
        try:
            result = self.convert(path)
        except ConversionError as exc:
            return current.failed(exc.detail, error=exc)
        return current.succeeded(result)

    def convert(self, path: Path) -> ConversionResult:
        """Convert `path`, raising `ConversionError` subclasses on failure."""

        source_name, raw_text = self.read_source(path)
        document = self._stage("parse", lambda: self.parse_document(raw_text, source_name))
        return self.convert_document(document, source_name)

    def read_source(self, path: Path) -> tuple[str, str]:
        """Return `(source_name, text)` for a `.json` file or a `.zip` export."""

        lower_name = path.name.lower()
        is_json = lower_name.endswith(".json")
        is_zip = lower_name.endswith(".zip")

        def _read_input() -> tuple[str, str] | None:
            if not is_json and not is_zip:
                raise UnsupportedFileType(path.name)
            if not path.is_file():
                raise InputNotFound(str(path))
            if is_json:
                return path.name, self._read_json_file(path)
            return None

        source = self._stage("input", _read_input, suffix=path.suffix.lower() or "none")
        if source is not None:
            return source
        return self._stage("locate", lambda: self._read_zip_source(path))

    def parse_document(self, raw_text: str, source_name: str) -> Mapping[str, Any]:
        """Parse source text as a JSON document.

        Raises:
            MalformedDocument: If the text is not valid JSON.
        """

        try:
            document = json.loads(raw_text)
        except (ValueError, RecursionError) as exc:
            raise MalformedDocument(f"Invalid JSON in `{source_name}`: {exc}") from exc
        if not isinstance(document, Mapping):
            return {}
        return document

    def convert_document(
        self, document: Mapping[str, Any], source_name: str = "Journal.json"
    ) -> ConversionResult:
        """Normalize and render a parsed document."""

        raw_entries = document.get("entries")
        if not isinstance(raw_entries, list) or not raw_entries:
            error = EmptyEntryList(Path(source_name).name)
            self._log_failure("parse", error)
            raise error

        entries = [JournalEntry.from_payload(item) for item in raw_entries]
        records = self._stage(
            "normalize", lambda: self.normalizer.normalize(entries), entries=len(entries)
        )
        return self._stage("render", lambda: self._render(records, len(entries), source_name))

    def _render(
        self, records: list[NormalizedRecord], entry_count: int, source_name: str
    ) -> ConversionResult:
        ordered = sort_records(records)
        markdown = render_document(ordered)
        if not markdown.strip():
            raise EmptyRenderedOutput()
        return ConversionResult(
            markdown=markdown,
            records=tuple(ordered),
            entry_count=entry_count,
            first_timestamp=format_timestamp(ordered[0].instant),
            last_timestamp=format_timestamp(ordered[-1].instant),
            source_name=source_name,
        )

    def _read_json_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding=_SOURCE_ENCODING)
        except UnicodeDecodeError as exc:
            raise MalformedDocument(f"`{path.name}` is not valid UTF-8 text: {exc}") from exc

    def _read_zip_source(self, path: Path) -> tuple[str, str]:
        try:
            with ZipArchiveContainer(path, encoding=_SOURCE_ENCODING) as container:
                return locate_source(container, self.source_filename)
        except ConversionError:
            raise
        except zipfile.BadZipFile as exc:
            raise MalformedDocument(f"Could not open zip export `{path.name}`: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedDocument(
                f"Journal document in `{path.name}` is not valid UTF-8 text: {exc}"
            ) from exc
        except (NotImplementedError, RuntimeError, EOFError, zlib.error) as exc:
            raise MalformedDocument(
                f"Could not read journal document from `{path.name}`: {exc}"
            ) from exc

    def _stage(self, stage: str, action: Callable[[], _T], **context: object) -> _T:
        """Run one stage callable with start/complete/failure logging."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage, **context)
        try:
            value = action()
        except ConversionError as exc:
            self._log_failure(stage, exc)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage)
        return value

    def _log_failure(self, stage: str, exc: Exception) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage, type(exc).__name__)
