"""Compressed bundle (`.textpack`) transform.

A textpack is a deflate zip of one bundle directory tree; entry names keep the
`<name>.textbundle/` prefix so extraction reproduces the directory.

`archive()` never deletes its input; the façade removes the intermediate
directory once the archive exists. `unarchive()` extracts into a scratch
directory that the caller owns and may reclaim.
"""

from __future__ import annotations

import logging
import shutil
import zipfile
from pathlib import Path
from typing import Callable, Optional

from textbundle.core.layout import ARCHIVE_EXTENSION, BUNDLE_EXTENSION
from textbundle.errors import ConversionError, InvalidDirectoryError

from .io import bundle_name

logger = logging.getLogger(__name__)

ProgressSink = Callable[[float], None]


def _archive_entries(root: Path) -> list[Path]:
    # Root first so the top-level directory entry exists even for an empty tree.
    return [root, *sorted(root.rglob("*"))]


def archive(bundle_path: Path, progress: Optional[ProgressSink] = None) -> Path:
    """Compress the bundle directory at `bundle_path` into a sibling `<name>.textpack`.

    `progress` (optional) is called on this thread with the completed fraction
    after every entry; the last call reports 1.0.

    Raises:
        InvalidDirectoryError: bundle_path is not an existing directory.
        FileExistsError: the archive file already exists.
    """
    root = Path(bundle_path)
    if not root.is_dir():
        raise InvalidDirectoryError(f"not a bundle directory: {root}")

    out_path = root.parent / f"{bundle_name(root)}{ARCHIVE_EXTENSION}"
    if out_path.exists():
        raise FileExistsError(f"archive already exists: {out_path}")

    entries = _archive_entries(root)
    total = len(entries)
    with zipfile.ZipFile(out_path, "x", compression=zipfile.ZIP_DEFLATED) as zf:
        for i, entry in enumerate(entries, start=1):
            arcname = Path(root.name, entry.relative_to(root)).as_posix()
            zf.write(entry, arcname)
            if progress is not None:
                progress(i / total)

    logger.debug("archived %s -> %s (%d entries)", root, out_path, total)
    return out_path


def _pick_bundle_dir(extract_root: Path, stem: str) -> Path:
    candidates = sorted(
        p for p in extract_root.iterdir() if p.is_dir() and p.suffix.lower() == BUNDLE_EXTENSION
    )
    if not candidates:
        raise ConversionError(f"no {BUNDLE_EXTENSION} directory found in archive extraction at {extract_root}")
    for p in candidates:
        if bundle_name(p) == stem:
            return p
    return candidates[0]


def unarchive(archive_path: Path, scratch_dir: Path) -> Path:
    """Extract `archive_path` under `scratch_dir` and return the bundle directory.

    Extraction lands in `scratch_dir/<archive stem>/`; a previous extraction at
    that location is replaced.

    Raises:
        FileNotFoundError: archive_path does not exist.
        zipfile.BadZipFile: the archive is corrupt.
        ConversionError: no `.textbundle` directory among the top-level entries.
    """
    src = Path(archive_path)
    stem = src.name[: -len(ARCHIVE_EXTENSION)] if src.name.lower().endswith(ARCHIVE_EXTENSION) else src.stem
    extract_root = Path(scratch_dir) / stem

    with zipfile.ZipFile(src, "r") as zf:
        if extract_root.exists():
            logger.debug("replacing previous extraction at %s", extract_root)
            shutil.rmtree(extract_root)
        extract_root.mkdir(parents=True)
        zf.extractall(extract_root)

    bundle_dir = _pick_bundle_dir(extract_root, stem)
    logger.debug("extracted %s -> %s", src, bundle_dir)
    return bundle_dir


__all__ = [
    "ProgressSink",
    "archive",
    "unarchive",
]
