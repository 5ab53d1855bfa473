#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/conv2nc"

FORMAT_LIBRARIES = ["import iris", "from iris", "import netCDF4", "import numpy"]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # The application layer only sees the engine through its port.
    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                *FORMAT_LIBRARIES,
                "conv2nc.adapters",
                "conv2nc.cli",
            ],
        )

    # The library entry points never reach into the command-line layer.
    for name in ("__init__.py", "schemas.py", "errors.py", "types.py", "months.py"):
        _assert_no_imports(PACKAGE / name, ["import typer", "conv2nc.cli"])

    # The argument parser stays free of engine and CLI framework imports.
    _assert_no_imports(
        PACKAGE / "cli/arguments.py",
        ["import typer", "conv2nc.adapters", *FORMAT_LIBRARIES],
    )

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, ["import typer", "conv2nc.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
