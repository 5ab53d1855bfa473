"""Application use-cases orchestrating batch conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from conv2nc.application.naming import (
    input_format_for,
    resolve_output_path,
    resolve_single_output_path,
)
from conv2nc.application.options import Options
from conv2nc.application.ports import BatchReporter, ConversionEngine
from conv2nc.application.results import BatchResult, ConversionRecord
from conv2nc.types import OUTPUT_FORMAT

logger = logging.getLogger(__name__)

READ_NOTICE = "attempting to read file {path}"
WRITE_NOTICE = "writing fields {selector} to file {path}"
READ_FAILURE = "failed to read input file: {path}"
WRITE_FAILURE = "failed to write output file: {path}"


def convert_files(
    *,
    files: Sequence[str],
    options: Options,
    engine: ConversionEngine,
    reporter: BatchReporter,
) -> BatchResult:
    """Use-case: convert every input file in command-line order.

    Dispatches to per-file or single-output mode. Read and write failures
    are reported and never stop the batch.
    """
    if options.single_output_file is not None:
        return _convert_to_single_file(files, options, engine, reporter)
    return _convert_per_file(files, options, engine, reporter)


def _convert_per_file(
    files: Sequence[str],
    options: Options,
    engine: ConversionEngine,
    reporter: BatchReporter,
) -> BatchResult:
    result = BatchResult()
    for input_path in files:
        output_path = resolve_output_path(input_path, options)

        if options.dry_run:
            reporter.notice(READ_NOTICE.format(path=input_path))
            reporter.notice(
                WRITE_NOTICE.format(selector=options.field_selector, path=output_path)
            )
            result.records.append(
                ConversionRecord(input_path, output_path, read_succeeded=True)
            )
            continue

        if not _load(input_path, engine, reporter, result):
            # No reset after a failed load.
            result.records.append(
                ConversionRecord(input_path, output_path, read_succeeded=False)
            )
            continue

        written = _write(output_path, options, engine, reporter, result)
        engine.reset()
        result.records.append(
            ConversionRecord(
                input_path, output_path, read_succeeded=True, write_succeeded=written
            )
        )
    return result


def _convert_to_single_file(
    files: Sequence[str],
    options: Options,
    engine: ConversionEngine,
    reporter: BatchReporter,
) -> BatchResult:
    result = BatchResult()
    output_path = resolve_single_output_path(options)

    for input_path in files:
        if options.dry_run:
            reporter.notice(READ_NOTICE.format(path=input_path))
            read_ok = True
        else:
            read_ok = _load(input_path, engine, reporter, result)
        result.records.append(ConversionRecord(input_path, output_path, read_ok))

    if options.dry_run:
        reporter.notice(
            WRITE_NOTICE.format(selector=options.field_selector, path=output_path)
        )
        return result

    _write(output_path, options, engine, reporter, result)
    engine.reset()
    return result


def _load(
    input_path: str,
    engine: ConversionEngine,
    reporter: BatchReporter,
    result: BatchResult,
) -> bool:
    input_format = input_format_for(input_path)
    logger.debug("loading %s as %s", input_path, input_format)
    result.reads_attempted += 1
    if engine.load(input_format, input_path):
        return True
    result.reads_failed += 1
    reporter.warning(READ_FAILURE.format(path=input_path))
    return False


def _write(
    output_path: str,
    options: Options,
    engine: ConversionEngine,
    reporter: BatchReporter,
    result: BatchResult,
) -> bool:
    logger.debug("writing fields %s to %s", options.field_selector, output_path)
    result.writes_attempted += 1
    if engine.write(OUTPUT_FORMAT, output_path, options.field_selector):
        return True
    result.writes_failed += 1
    reporter.warning(WRITE_FAILURE.format(path=output_path))
    return False
