"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence

from conv2nc.application.options import Options
from conv2nc.application.ports import BatchReporter, ConversionEngine
from conv2nc.application.results import BatchResult, ConversionRecord


def convert_files(
    *,
    files: Sequence[str],
    options: Options,
    engine: ConversionEngine,
    reporter: BatchReporter,
) -> BatchResult:
    """Run a batch conversion via lazy use-case import."""
    from conv2nc.application.use_cases import convert_files as _impl

    return _impl(files=files, options=options, engine=engine, reporter=reporter)


__all__ = [
    "BatchReporter",
    "BatchResult",
    "ConversionEngine",
    "ConversionRecord",
    "Options",
    "convert_files",
]
