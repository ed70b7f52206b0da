"""TextBundle I/O helpers.

Holds the `info.json` codec in [`metadata`](metadata.py:1).
"""

from __future__ import annotations

from .metadata import decode_metadata, encode_metadata, read_metadata_json, write_metadata_json

__all__ = [
    "decode_metadata",
    "encode_metadata",
    "read_metadata_json",
    "write_metadata_json",
]
