"""Output file naming policy."""

from __future__ import annotations

import os
from pathlib import PurePath

from conv2nc.application.options import Options
from conv2nc.months import convert_month_suffix
from conv2nc.types import OUTPUT_EXTENSION, SEQUENTIAL_EXTENSION


def normalize_directory(path: str) -> str:
    """Return ``path`` terminated by a path separator."""
    if not path:
        return path
    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    if path.endswith(separators):
        return path
    return path + os.sep


def output_base_name(input_path: str) -> str:
    """Return the file-name component with a ``.pp`` extension removed."""
    name = PurePath(input_path).name
    if PurePath(name).suffix == SEQUENTIAL_EXTENSION:
        return name[: -len(SEQUENTIAL_EXTENSION)]
    return name


def resolve_output_path(input_path: str, options: Options) -> str:
    """Compute the per-file netCDF destination for ``input_path``.

    Parameters
    ----------
    input_path : str
        Input file path as given on the command line.
    options : Options
        Parsed batch options.

    Returns
    -------
    str
        ``<base>.nc`` where ``<base>`` is the input file name (``.pp``
        stripped, month abbreviation rewritten when ``convert_months`` is
        set), prefixed by the output directory when one is configured.
    """
    base = output_base_name(input_path)
    if options.convert_months:
        base = convert_month_suffix(base)
    return _with_directory(base + OUTPUT_EXTENSION, options)


def resolve_single_output_path(options: Options) -> str:
    """Return the single-output destination with the directory prefix applied."""
    if options.single_output_file is None:
        raise ValueError("single-output mode is not enabled")
    return _with_directory(options.single_output_file, options)


def input_format_for(input_path: str) -> str:
    """Select the engine input format from the file extension."""
    if PurePath(input_path).suffix == SEQUENTIAL_EXTENSION:
        return "PP"
    return "UM"


def _with_directory(name: str, options: Options) -> str:
    if options.output_directory:
        return options.output_directory + name
    return name
