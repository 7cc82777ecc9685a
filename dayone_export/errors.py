"""Domain exceptions for conversion diagnostics."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Raised when a specific conversion stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped conversion error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class UnsupportedFileType(ConversionError):
    """Raised when the input filename suffix is neither `.json` nor `.zip`."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            stage="input",
            detail=f"Unsupported file type `{filename}`. Use Day One .zip or Journal.json",
            hint="Export your journal from Day One as JSON and pass the `.zip` or `Journal.json`.",
        )
        self.filename = filename


class InputNotFound(ConversionError):
    """Raised when the input path does not exist."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            stage="input",
            detail=f"Input file not found: `{filename}`.",
            hint="Verify the path and rerun.",
        )
        self.filename = filename


class DocumentNotFound(ConversionError):
    """Raised when an archive holds no member matching the source filename."""

    def __init__(self, source_filename: str = "journal.json") -> None:
        super().__init__(
            stage="locate",
            detail=f"No {source_filename} found in zip export",
            hint="Make sure the archive is an unmodified Day One JSON export.",
        )
        self.source_filename = source_filename


class MalformedDocument(ConversionError):
    """Raised when the selected source text is not valid JSON."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            stage="parse",
            detail=detail,
            hint="Re-export the journal; the file may be truncated or edited.",
        )


class EmptyEntryList(ConversionError):
    """Raised when the parsed document carries zero entries."""

    def __init__(self, source_name: str = "Journal.json") -> None:
        super().__init__(stage="parse", detail=f"No entries found in {source_name}")


class EmptyRenderedOutput(ConversionError):
    """Raised when rendering produced only whitespace."""

    def __init__(self) -> None:
        super().__init__(
            stage="render",
            detail="Could not build markdown output from entries",
        )
