"""Month abbreviation to numeric file-name suffix table."""

from __future__ import annotations

from types import MappingProxyType

MONTH_CODES = MappingProxyType(
    {
        "jan": "_001",
        "feb": "_002",
        "mar": "_003",
        "apr": "_004",
        "may": "_005",
        "jun": "_006",
        "jul": "_007",
        "aug": "_008",
        "sep": "_009",
        "oct": "_010",
        "nov": "_011",
        "dec": "_012",
    }
)


def convert_month_suffix(name: str) -> str:
    """Replace a trailing 3-letter month abbreviation with its numeric code.

    Parameters
    ----------
    name : str
        File base name, e.g. ``xfexaa.pmi2oct``.

    Returns
    -------
    str
        ``name`` with its last three characters swapped for the matching
        ``_NNN`` code, or ``name`` unchanged when they are not a lowercase
        month abbreviation (names shorter than three characters never match).
    """
    if len(name) < 3:
        return name
    code = MONTH_CODES.get(name[-3:])
    if code is None:
        return name
    return name[:-3] + code
