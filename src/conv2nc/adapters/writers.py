"""netCDF encoder for decoded UM fields."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import iris
import iris.cube
import iris.fileformats.netcdf
import numpy as np

from conv2nc.errors import WriteError

logger = logging.getLogger(__name__)


class NetcdfFieldWriter:
    """Write selected fields into one netCDF file with ``iris.save``.

    Each field becomes a variable ``field<k>`` where ``k`` is its field
    number in the engine's store. Dimension and coordinate variables are
    named by the iris netCDF saver from the fields' coordinates, so fields
    on one grid share dimensions and a second grid gets suffixed names.

    Note:
        Double precision data is stored as ``float32`` unless
        ``store_float32`` is disabled.
    """

    def __init__(self, *, zlib: bool = True, store_float32: bool = True) -> None:
        self.zlib = zlib
        self.store_float32 = store_float32

    def write(self, path: str, fields: Sequence[tuple[int, iris.cube.Cube]]) -> None:
        """Create ``path`` holding ``fields`` (pairs of field number and cube).

        Raises
        ------
        WriteError
            If the file cannot be created or a variable cannot be written.
            A file created by the failed call is removed.
        """
        cubes = iris.cube.CubeList(
            self.prepare_cube(number, cube) for number, cube in fields
        )
        existed = Path(path).exists()
        try:
            iris.save(cubes, path, saver=iris.fileformats.netcdf.save, zlib=self.zlib)
        except (OSError, RuntimeError, ValueError, TypeError, IndexError) as exc:
            if not existed:
                Path(path).unlink(missing_ok=True)
            raise WriteError(f"cannot write {path}: {exc}") from exc

        logger.debug('Wrote %d fields to "%s".', len(cubes), path)

    def prepare_cube(self, number: int, cube: iris.cube.Cube) -> iris.cube.Cube:
        """Return a copy of ``cube`` named and typed for output."""
        cube = cube.copy()
        cube.var_name = f"field{number}"
        double = cube.dtype.kind == "f" and cube.dtype.itemsize == 8
        if self.store_float32 and double:
            cube.data = cube.core_data().astype(np.float32)
        return cube
