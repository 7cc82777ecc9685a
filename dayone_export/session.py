"""Conversion session state.

A `ConversionSession` holds the status line and the single most recent
output document. Every transition returns a new instance; a failure always
clears the output so stale documents are never shown.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import ConversionError
from .models.datatypes import ConversionResult


STATUS_READY = "ready"
STATUS_PROCESSING = "processing"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass(frozen=True, slots=True)
class ConversionSession:
    """Status and output of the latest conversion attempt.

    Attributes:
        status: One of `ready`, `processing`, `success`, or `error`.
        message: Human-readable status line.
        detail: Secondary line (timestamp range on success).
        output: Rendered document of the last successful run, else empty.
        error: Conversion error of a failed run.
    """

    status: str = STATUS_READY
    message: str = "Ready"
    detail: str = ""
    output: str = ""
    error: ConversionError | None = None

    @property
    def has_output(self) -> bool:
        return bool(self.output)

    def processing(self, message: str = "Processing file...") -> ConversionSession:
        return replace(self, status=STATUS_PROCESSING, message=message)

    def succeeded(self, result: ConversionResult) -> ConversionSession:
        """Replace the output with `result` and summarize it."""

        return ConversionSession(
            status=STATUS_SUCCESS,
            message=f"Done. {result.entry_count} entries converted.",
            detail=(
                f"Range: {result.first_timestamp} to {result.last_timestamp} (UTC). "
                "Processed locally."
            ),
            output=result.markdown,
        )

    def failed(
        self, message: str, error: ConversionError | None = None
    ) -> ConversionSession:
        """Record an error and drop any previous output."""

        return ConversionSession(
            status=STATUS_ERROR,
            message=message or "Failed to process file",
            error=error,
        )
