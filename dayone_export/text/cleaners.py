"""Deterministic text cleaning rules.

Responsibilities:
- Provide composable cleanup rules for Day One export text artifacts.
- Keep cleanup predictable and idempotent.
"""

from __future__ import annotations

import re
from typing import Protocol


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class UnescapePunctuation:
    """Drop the Markdown escape backslash Day One writes before `.` and `-`.

    Backslashes are read in pairs: `\\\\.` is an escaped backslash and stays,
    `\\\\\\.` loses only the escape in front of the period.
    """

    _ESCAPED_PUNCTUATION_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\([.-])")

    def apply(self, text: str) -> str:
        """Remove one backslash directly preceding a period or hyphen."""

        return self._ESCAPED_PUNCTUATION_RE.sub(r"\1\2", text)


class TextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or default rule sequence."""

        self.rules = rules or [UnescapePunctuation()]

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
