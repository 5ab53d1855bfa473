"""Convert UM fieldsfiles and PP files to netCDF."""

from __future__ import annotations

from collections.abc import Sequence

from conv2nc.application.options import Options, encode_field_selector
from conv2nc.application.ports import BatchReporter
from conv2nc.application.results import BatchResult

__version__ = "0.1.0"


def convert_to_netcdf(
    files: Sequence[str],
    *,
    convert_months: bool = False,
    fields: Sequence[int] | None = None,
    output_directory: str | None = None,
    single_output_file: str | None = None,
    dry_run: bool = False,
    reporter: BatchReporter | None = None,
) -> BatchResult:
    """Convert files to netCDF with the default field-store engine.

    Parameters
    ----------
    files : Sequence[str]
        Input paths; ``.pp`` files are read as PP, others as UM fieldsfiles.
    convert_months : bool, default=False
        Rewrite a trailing month abbreviation in output names.
    fields : Sequence[int] | None, default=None
        Field numbers to write; all fields when omitted.
    output_directory : str | None, default=None
        Directory prefix for output files.
    single_output_file : str | None, default=None
        Merge every input into this one output file.
    dry_run : bool, default=False
        Report actions without converting.
    reporter : BatchReporter | None, default=None
        Receiver of notices and per-file failures; the ``conv2nc`` logger
        when omitted.

    Returns
    -------
    BatchResult
        Per-file outcomes and failure counts.
    """
    from conv2nc.adapters.engine import FieldStoreEngine
    from conv2nc.application.naming import normalize_directory
    from conv2nc.application.reporting import LoggingReporter
    from conv2nc.application.use_cases import convert_files

    options = Options(
        convert_months=convert_months,
        field_selector=encode_field_selector(
            None if fields is None else ",".join(str(number) for number in fields)
        ),
        output_directory=(
            normalize_directory(output_directory) if output_directory is not None else None
        ),
        single_output_file=single_output_file,
        dry_run=dry_run,
    )
    return convert_files(
        files=list(files),
        options=options,
        engine=FieldStoreEngine(),
        reporter=reporter or LoggingReporter(),
    )


__all__ = [
    "BatchResult",
    "Options",
    "convert_to_netcdf",
]
