"""Command-line token parser.

A single left-to-right scan driven by one ``Expecting`` value. Flags that
take an argument move the scan into the matching state, and the next token
is consumed verbatim as that argument, even when it looks like a flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from conv2nc.application.naming import normalize_directory
from conv2nc.application.options import Options, encode_field_selector
from conv2nc.errors import HelpRequested, UsageError

HELP_HINT = "use -h or --help for help"


class Expecting(Enum):
    """Parser state: which option's argument the next token belongs to."""

    NONE = "none"
    FIELD_LIST = "field list"
    OUTPUT_FILE = "output file"
    OUTPUT_DIR = "output directory"


# Flags that take an argument, by the state they move the scan into.
ARGUMENT_FLAGS: dict[str, Expecting] = {
    "-f": Expecting.FIELD_LIST,
    "--fields": Expecting.FIELD_LIST,
    "-o": Expecting.OUTPUT_FILE,
    "--output": Expecting.OUTPUT_FILE,
    "-d": Expecting.OUTPUT_DIR,
    "--directory": Expecting.OUTPUT_DIR,
}

SWITCH_FLAGS: dict[str, str] = {
    "-a": "convert_months",
    "--convert-months": "convert_months",
    "-n": "dry_run",
    "--dry-run": "dry_run",
}

HELP_FLAGS = frozenset({"-h", "--help"})

MISSING_ARGUMENT: dict[Expecting, str] = {
    Expecting.FIELD_LIST: f"-f must have a field list, {HELP_HINT}",
    Expecting.OUTPUT_FILE: f"-o must have a file name, {HELP_HINT}",
    Expecting.OUTPUT_DIR: f"-d must have a directory path, {HELP_HINT}",
}


@dataclass(frozen=True)
class ParsedArguments:
    """Validated command line: batch options plus ordered input files."""

    options: Options
    files: tuple[str, ...]


def parse_arguments(tokens: Sequence[str]) -> ParsedArguments:
    """Parse raw command-line tokens.

    Parameters
    ----------
    tokens : Sequence[str]
        Arguments without the program name.

    Returns
    -------
    ParsedArguments
        Options and input files.

    Raises
    ------
    HelpRequested
        If no tokens were given, or ``-h``/``--help`` was seen outside an
        option argument.
    UsageError
        On an unknown option, a missing option argument, or no input files.
    """
    if not tokens:
        raise HelpRequested()

    state = Expecting.NONE
    switches = {"convert_months": False, "dry_run": False}
    values: dict[Expecting, str] = {}
    files: list[str] = []

    for token in tokens:
        if state is not Expecting.NONE:
            values[state] = token
            state = Expecting.NONE
        elif token in HELP_FLAGS:
            raise HelpRequested()
        elif token in ARGUMENT_FLAGS:
            state = ARGUMENT_FLAGS[token]
        elif token in SWITCH_FLAGS:
            switches[SWITCH_FLAGS[token]] = True
        elif token.startswith("-"):
            raise UsageError(f"unknown option {token}, {HELP_HINT}")
        else:
            files.append(token)

    if state is not Expecting.NONE:
        raise UsageError(MISSING_ARGUMENT[state])
    if not files:
        raise UsageError(f"no input files, {HELP_HINT}")

    directory = values.get(Expecting.OUTPUT_DIR)
    options = Options(
        convert_months=switches["convert_months"],
        field_selector=encode_field_selector(values.get(Expecting.FIELD_LIST)),
        output_directory=normalize_directory(directory) if directory is not None else None,
        single_output_file=values.get(Expecting.OUTPUT_FILE),
        dry_run=switches["dry_run"],
    )
    return ParsedArguments(options=options, files=tuple(files))
