"""TextBundle on-disk formats.

- bundle directory save/load (`.textbundle`)
- zip transform to and from the packed form (`.textpack`)
"""

from __future__ import annotations

from .archive import ProgressSink, archive, unarchive
from .io import read_directory, write_directory

__all__ = [
    "ProgressSink",
    "archive",
    "read_directory",
    "unarchive",
    "write_directory",
]
