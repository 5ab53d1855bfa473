"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol


class ConversionEngine(Protocol):
    """Stateful field store that decodes input files and encodes output files.

    Loaded fields accumulate across ``load`` calls until ``reset``.
    """

    def load(self, input_format: str, path: str) -> bool:
        """Decode ``path`` and append its fields; return ``False`` on failure."""

    def write(self, output_format: str, path: str, field_selector: str) -> bool:
        """Write the selected loaded fields to ``path``; ``False`` on failure."""

    def reset(self) -> None:
        """Discard every loaded field."""


class BatchReporter(Protocol):
    """Sink for the driver's user-facing progress and failure messages."""

    def notice(self, message: str) -> None:
        """Report a dry-run action."""

    def warning(self, message: str) -> None:
        """Report a recoverable per-file failure."""
