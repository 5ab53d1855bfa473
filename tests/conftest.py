"""Shared pytest configuration, marker assignment, and file fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import numpy as np
import pytest

from synthetic import field_header, fieldsfile_bytes, pp_bytes

type FileWriter = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_pp(tmp_path: Path) -> FileWriter:
    """Write a PP file under ``tmp_path`` with one field per grid."""

    def _write(name: str, grids: Sequence[np.ndarray], **header: object) -> Path:
        fields = [
            (field_header(*grid.shape, stash=100 + number, **header), grid)
            for number, grid in enumerate(grids)
        ]
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pp_bytes(fields))
        return path

    return _write


@pytest.fixture
def write_fieldsfile(tmp_path: Path) -> FileWriter:
    """Write a UM fieldsfile under ``tmp_path`` with one field per grid."""

    def _write(
        name: str,
        grids: Sequence[np.ndarray],
        *,
        spare_entries: int = 0,
        **header: object,
    ) -> Path:
        fields = [
            (field_header(*grid.shape, stash=200 + number, **header), grid)
            for number, grid in enumerate(grids)
        ]
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(fieldsfile_bytes(fields, spare_entries=spare_entries))
        return path

    return _write
