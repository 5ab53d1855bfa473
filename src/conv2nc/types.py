"""Shared type aliases and constants for conversion modules."""

from __future__ import annotations

from typing import Literal

type InputFormat = Literal["UM", "PP"]
type OutputFormat = Literal["netcdf"]

ALL_FIELDS = "-1"
"""Field selector sentinel meaning every loaded field."""

SEQUENTIAL_EXTENSION = ".pp"
OUTPUT_EXTENSION = ".nc"
OUTPUT_FORMAT: OutputFormat = "netcdf"
