"""Test setup for opentodos."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def outline_file(tmp_path: Path):
    """Write lines to an outline file and return its path."""

    def _write(lines: list[str], name: str = "todo.md", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("utf-8"))
        return path

    return _write
