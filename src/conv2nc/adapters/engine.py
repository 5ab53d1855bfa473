"""Default conversion engine: an in-memory field store."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import iris.cube
from pydantic import ValidationError

from conv2nc.adapters.readers import READERS, FieldReader
from conv2nc.adapters.writers import NetcdfFieldWriter
from conv2nc.errors import ConversionError, FieldSelectionError, UnsupportedFormatError
from conv2nc.schemas import FieldSelection
from conv2nc.types import OUTPUT_FORMAT

logger = logging.getLogger(__name__)


class FieldStoreEngine:
    """Accumulate decoded field cubes across loads and write selections of them.

    Field numbers are 0-based positions in the store, so after several loads
    they address the concatenation of every loaded file in load order. A
    failed load leaves the store unchanged.
    """

    def __init__(
        self,
        writer: NetcdfFieldWriter | None = None,
        readers: Mapping[str, FieldReader] | None = None,
    ) -> None:
        self.writer = writer or NetcdfFieldWriter()
        self.readers = dict(READERS if readers is None else readers)
        self._fields: list[iris.cube.Cube] = []

    @property
    def fields(self) -> tuple[iris.cube.Cube, ...]:
        return tuple(self._fields)

    def load(self, input_format: str, path: str) -> bool:
        """Decode ``path`` as ``input_format`` and append its fields."""
        try:
            reader = self.readers.get(input_format)
            if reader is None:
                raise UnsupportedFormatError(f"unknown input format {input_format!r}")
            fields = reader(path)
        except ConversionError as exc:
            logger.warning("%s", exc)
            return False
        except Exception:
            logger.exception("unexpected error while reading %s", path)
            return False

        self._fields.extend(fields)
        logger.debug(
            "loaded %d fields from %s (%d in store)", len(fields), path, len(self._fields)
        )
        return True

    def write(self, output_format: str, path: str, field_selector: str) -> bool:
        """Write the fields named by ``field_selector`` to ``path``."""
        try:
            selected = self._select(output_format, field_selector)
            self.writer.write(path, selected)
        except ConversionError as exc:
            logger.warning("%s", exc)
            return False
        except Exception:
            logger.exception("unexpected error while writing %s", path)
            return False
        return True

    def reset(self) -> None:
        """Discard every loaded field."""
        logger.debug("clearing %d fields", len(self._fields))
        self._fields.clear()

    def _select(
        self, output_format: str, field_selector: str
    ) -> list[tuple[int, iris.cube.Cube]]:
        if output_format != OUTPUT_FORMAT:
            raise UnsupportedFormatError(f"unknown output format {output_format!r}")
        try:
            selection = FieldSelection.from_selector(field_selector)
        except ValidationError as exc:
            raise FieldSelectionError(
                f"invalid field selector {field_selector!r}: {exc}"
            ) from exc
        if not self._fields:
            raise FieldSelectionError("no fields loaded")

        indices = dict.fromkeys(selection.resolve(len(self._fields)))
        missing = [index for index in indices if index >= len(self._fields)]
        if missing:
            raise FieldSelectionError(
                f"field numbers {missing} out of range, "
                f"{len(self._fields)} fields loaded"
            )
        return [(index, self._fields[index]) for index in indices]
