#!/usr/bin/env python3
"""
conv2nc.cli.cli

Typer-based CLI for converting UM fieldsfiles and PP files to netCDF.

Typer's own option handling is switched off for the single command: every
token is forwarded to :func:`conv2nc.cli.arguments.parse_arguments`, which
owns option semantics and diagnostics.

Examples
--------
One netCDF file per input, month names rewritten, into ``out/``:

    conv2nc -a -d out xfexaa.pmi2oct xfexaa.pmi2nov

Fields 0 and 3 of every input merged into one file:

    conv2nc -f 0,3 -o merged.nc *.pp
"""

from __future__ import annotations

import logging

import typer
from typer.core import TyperCommand

from conv2nc.application.use_cases import convert_files
from conv2nc.cli.arguments import parse_arguments
from conv2nc.errors import HelpRequested, UsageError

USAGE = """\
usage: conv2nc [-a] [-d path] [-f id1[,id2,...]] [-o outfile] [-n] [-h] infile1 [infile2 ...]

Convert UM fieldsfiles and PP files to netCDF.

By default each input file is written to its own netCDF file, named after
the input with a .pp extension removed and .nc appended.

options:
  -a, --convert-months     replace a trailing 3-letter month name in the
                           output file name with a numeric code, e.g.
                           xfexaa.pmi2oct -> xfexaa.pmi2_010.nc
  -d, --directory PATH     write output files into directory PATH
  -f, --fields LIST        comma-separated field numbers to write
                           (default: all fields)
  -h, --help               show this help and exit
  -n, --dry-run            report what would be read and written without
                           converting anything
  -o, --output FILE        merge the selected fields of all input files into
                           the single netCDF file FILE (-a has no effect)
"""

RAW_TOKENS = "conv2nc.raw_tokens"

app = typer.Typer(
    name="conv2nc",
    help="Convert UM fieldsfiles and PP files to netCDF.",
    add_completion=False,
)


class EchoReporter:
    """Print batch notices to stdout and failures to stderr."""

    def notice(self, message: str) -> None:
        """Report a dry-run action."""
        typer.echo(message)

    def warning(self, message: str) -> None:
        """Report a recoverable per-file failure."""
        typer.echo(message, err=True)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


class RawTokensCommand(TyperCommand):
    """Command that records its argument list before click parses it.

    Click drops a bare ``--`` while parsing, so the token parser reads the
    recorded list instead of ``ctx.args``.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_TOKENS] = tuple(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawTokensCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def convert_cmd(ctx: typer.Context) -> None:
    """Convert input files to netCDF.

    Parameters
    ----------
    ctx : typer.Context
        Click context holding the untouched command-line tokens, options
        and input files interleaved.

    Notes
    -----
    - Exit status is 1 only for usage errors; per-file read and write
      failures are reported but the run still succeeds.
    """
    tokens = ctx.meta.get(RAW_TOKENS, tuple(ctx.args))
    try:
        parsed = parse_arguments(tokens)
    except HelpRequested:
        typer.echo(USAGE, nl=False)
        raise typer.Exit(code=HelpRequested.exit_code)
    except UsageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code)

    _configure_logging()

    from conv2nc.adapters.engine import FieldStoreEngine

    convert_files(
        files=parsed.files,
        options=parsed.options,
        engine=FieldStoreEngine(),
        reporter=EchoReporter(),
    )


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
