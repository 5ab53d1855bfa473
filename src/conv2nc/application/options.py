"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from conv2nc.types import ALL_FIELDS


@dataclass(frozen=True)
class Options:
    """Batch conversion options built once from the command line.

    ``output_directory`` is already separator-terminated when set. When
    ``single_output_file`` is set, per-file naming and month rewriting are
    not applied.
    """

    convert_months: bool = False
    field_selector: str = ALL_FIELDS
    output_directory: str | None = None
    single_output_file: str | None = None
    dry_run: bool = False


def encode_field_selector(field_list: str | None) -> str:
    """Turn ``88,89,149`` into the engine's ``88 89 149`` selector form.

    Returns the all-fields sentinel when no list was given.
    """
    if field_list is None:
        return ALL_FIELDS
    return " ".join(item for item in field_list.split(",") if item)
