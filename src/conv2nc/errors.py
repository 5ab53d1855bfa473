"""Exception hierarchy for command-line parsing and field conversion."""

from __future__ import annotations


class Conv2ncError(Exception):
    """Base class for all conv2nc errors."""

    exit_code = 1


class UsageError(Conv2ncError):
    """Malformed or incomplete command-line arguments."""


class HelpRequested(Conv2ncError):
    """Raised when the caller asked for usage text instead of a conversion."""

    exit_code = 0


class ConversionError(Conv2ncError):
    """Base class for conversion engine failures."""


class ReadError(ConversionError):
    """Input file could not be decoded."""


class UnsupportedFormatError(ConversionError):
    """Input or output format, or a packing scheme, is not supported."""


class FieldSelectionError(ConversionError):
    """Field selector is malformed or addresses fields that are not loaded."""


class WriteError(ConversionError):
    """Output file could not be written."""
