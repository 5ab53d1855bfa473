"""Decoders for UM fieldsfiles and PP files, built on iris.

Every 2-D field in a file becomes one cube; fields are never merged, so a
field's position in the returned list is its position in the file.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable

import iris.cube
import iris.fileformats.pp
import iris.fileformats.um
from iris.fileformats.pp import PPField
from iris.warnings import IrisLoadWarning

from conv2nc.errors import ReadError, UnsupportedFormatError

logger = logging.getLogger(__name__)

type FieldReader = Callable[[str], list[iris.cube.Cube]]
type FieldSource = Callable[[str], Iterable[PPField]]


def _scan_fields(path: str, source: FieldSource) -> list[PPField]:
    # iris warns and stops at the first unreadable header; that is a
    # failed read here, not a short file.
    with warnings.catch_warnings():
        warnings.simplefilter("error", IrisLoadWarning)
        try:
            return list(source(path))
        except IrisLoadWarning as exc:
            raise ReadError(f"{path}: {exc}") from exc


def _decode(path: str, source: FieldSource) -> list[iris.cube.Cube]:
    try:
        fields = _scan_fields(path, source)
        if not fields:
            raise ReadError(f"{path}: no fields")
        cubes = iris.cube.CubeList(
            cube for cube, _ in iris.fileformats.pp.load_pairs_from_fields(fields)
        )
        cubes.realise_data()
    except OSError as exc:
        raise ReadError(f"cannot open {path}: {exc.strerror or exc}") from exc
    except NotImplementedError as exc:
        raise UnsupportedFormatError(f"{path}: {exc}") from exc
    except (ValueError, IndexError, TypeError) as exc:
        raise ReadError(f"{path}: {exc}") from exc

    for number, cube in enumerate(cubes):
        cube.attributes["source_file"] = path
        logger.debug("%s: field %d %s %s", path, number, cube.name(), cube.shape)
    return list(cubes)


def read_pp_file(path: str) -> list[iris.cube.Cube]:
    """Decode every field of a PP file.

    Raises
    ------
    ReadError
        If the file cannot be opened, a header or data record cannot be
        decoded, or the file holds no fields.
    UnsupportedFormatError
        If a field uses a packing scheme iris cannot unpack.
    """
    return _decode(path, iris.fileformats.pp.load)


def read_um_file(path: str) -> list[iris.cube.Cube]:
    """Decode every field of a UM fieldsfile.

    The fixed-length header locates the lookup table; unused trailing
    lookup entries end it. WGDOS-packed fields need the ``mo_pack``
    package (``wgdos`` extra).

    Raises
    ------
    ReadError
        If the file cannot be opened, its headers are invalid or truncated,
        or it holds no fields.
    UnsupportedFormatError
        If a field uses a packing scheme iris cannot unpack.
    """
    return _decode(path, iris.fileformats.um.um_to_pp)


READERS: dict[str, FieldReader] = {
    "PP": read_pp_file,
    "UM": read_um_file,
}
