"""Builders for small synthetic PP files and UM fieldsfiles."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

type HeaderWords = tuple[np.ndarray, np.ndarray]


def field_header(
    rows: int,
    columns: int,
    *,
    stash: int = 16222,
    lbpack: int = 0,
    lbuser1: int = 1,
    lbfc: int = 0,
    lblev: int = 0,
    blev: float = 0.0,
    bzy: float = -92.5,
    bdy: float = 2.5,
    bzx: float = -3.75,
    bdx: float = 3.75,
    bmdi: float = -1.0e30,
    validity: tuple[int, int, int, int, int] = (2000, 10, 1, 0, 0),
) -> HeaderWords:
    """Build integer and real lookup words for a synthetic field."""
    ints = np.zeros(45, dtype=np.int64)
    reals = np.zeros(19, dtype=np.float64)
    ints[0:5] = validity
    ints[6:11] = validity
    ints[12] = 1  # LBTIM: validity time only, Gregorian calendar
    ints[14] = rows * columns
    ints[15] = 1  # LBCODE: regular lat-lon grid
    ints[17] = rows
    ints[18] = columns
    ints[20] = lbpack
    ints[21] = 3  # LBREL: header release 3
    ints[22] = lbfc
    ints[32] = lblev
    ints[38] = lbuser1
    ints[41] = stash
    ints[44] = 1  # LBUSER7: atmosphere model
    reals[6] = blev
    reals[13:18] = (bzy, bdy, bzx, bdx, bmdi)
    return ints, reals


def record(payload: bytes) -> bytes:
    """Frame ``payload`` with big-endian Fortran record-length markers."""
    marker = np.array([len(payload)], dtype=">i4").tobytes()
    return marker + payload + marker


def pp_bytes(fields: Sequence[tuple[HeaderWords, np.ndarray]]) -> bytes:
    """Encode fields as a big-endian 32-bit PP file."""
    out = bytearray()
    for (ints, reals), data in fields:
        out += record(ints.astype(">i4").tobytes() + reals.astype(">f4").tobytes())
        dtype = ">i4" if ints[38] in (2, 3) else ">f4"
        out += record(np.asarray(data).astype(dtype).tobytes())
    return bytes(out)


def fieldsfile_bytes(
    fields: Sequence[tuple[HeaderWords, np.ndarray]], *, spare_entries: int = 0
) -> bytes:
    """Encode fields as a big-endian 64-bit UM fieldsfile.

    ``spare_entries`` appends unused lookup entries (LBBEGIN = -1).
    """
    count = len(fields) + spare_entries
    lookup_start = 257
    data_start = lookup_start + count * 64

    fixed = np.full(256, -32768, dtype=">i8")
    fixed[0] = 20
    fixed[1] = 1
    fixed[4] = 3  # fieldsfile
    fixed[8] = 6  # ENDGame grid staggering
    fixed[149] = lookup_start
    fixed[150] = 64
    fixed[151] = count
    fixed[159] = data_start
    fixed[160] = sum(_data_words(header, data) for header, data in fields)

    lookup = bytearray()
    payload = bytearray()
    address = data_start - 1
    for (ints, reals), data in fields:
        ints = ints.copy()
        encoded = _encode_words(ints, data)
        words = len(encoded) // 8
        ints[14] = words
        ints[28] = address
        ints[29] = words
        lookup += ints.astype(">i8").tobytes() + reals.astype(">f8").tobytes()
        payload += encoded
        address += words

    for _ in range(spare_entries):
        unused = np.full(64, -99, dtype=">i8")
        unused[28] = -1
        lookup += unused.tobytes()

    return fixed.tobytes() + bytes(lookup) + bytes(payload)


def sample_grid(rows: int = 3, columns: int = 4, offset: float = 0.0) -> np.ndarray:
    """Return a small float grid with distinct values."""
    return np.arange(rows * columns, dtype=np.float64).reshape(rows, columns) + offset


def _encode_words(ints: np.ndarray, data: np.ndarray) -> bytes:
    dtype = ">i8" if ints[38] in (2, 3) else ">f8"
    return np.asarray(data).ravel().astype(dtype).tobytes()


def _data_words(header: HeaderWords, data: np.ndarray) -> int:
    return len(_encode_words(header[0], data)) // 8
