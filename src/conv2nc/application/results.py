"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConversionRecord:
    """Outcome of one input file within a batch run.

    ``write_succeeded`` is ``None`` when no write was attempted for this
    input (dry-run, failed read, or single-output mode).
    """

    input_path: str
    output_path: str
    read_succeeded: bool
    write_succeeded: bool | None = None


@dataclass
class BatchResult:
    """Structured batch outcome."""

    records: list[ConversionRecord] = field(default_factory=list)
    reads_attempted: int = 0
    reads_failed: int = 0
    writes_attempted: int = 0
    writes_failed: int = 0
