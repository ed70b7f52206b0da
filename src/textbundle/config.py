"""Runtime configuration.

The only setting is the scratch directory that packed bundles are extracted
into. Resolution order: explicit argument, then `TEXTBUNDLE_SCRATCH_DIR`,
then `<system temp>/textbundle`.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

SCRATCH_DIR_ENV = "TEXTBUNDLE_SCRATCH_DIR"


def default_scratch_dir() -> Path:
    value = os.environ.get(SCRATCH_DIR_ENV, "").strip()
    if value:
        return Path(value).expanduser()
    return Path(tempfile.gettempdir()) / "textbundle"


def resolve_scratch_dir(scratch_dir: Optional[Path | str] = None) -> Path:
    """Return the scratch directory to use, creating it if needed."""
    p = Path(scratch_dir) if scratch_dir is not None else default_scratch_dir()
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = [
    "SCRATCH_DIR_ENV",
    "default_scratch_dir",
    "resolve_scratch_dir",
]
