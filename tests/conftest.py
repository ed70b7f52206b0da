"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import textbundle` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared fixtures
# =============================================================================

MARKDOWN_TEXT = "# Konnichiwa Sakyou!\n\n![rabbit](assets/white_rabbit.jpg)\n"

# Smallest useful JPEG-ish payload: SOI marker, some bytes, EOI marker.
RABBIT_BYTES = b"\xff\xd8\xff\xe0" + bytes(range(256)) + b"\xff\xd9"


def make_asset(directory: Path, name: str, payload: bytes) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    p = directory / name
    p.write_bytes(payload)
    return p


@pytest.fixture
def rabbit_asset(tmp_path: Path) -> Path:
    return make_asset(tmp_path / "sources", "white_rabbit.jpg", RABBIT_BYTES)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    p = tmp_path / "out"
    p.mkdir()
    return p


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    return tmp_path / "scratch"
