"""Public entry points: write/read a document as a TextBundle.

`write()` produces either a bundle directory or, with `compressed=True`, a
textpack (the intermediate directory is deleted once the archive exists).
`read()` accepts either form and routes on the path extension alone, so an
unrecognized extension fails before the filesystem is touched.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from textbundle.bundle.archive import ProgressSink, archive, unarchive
from textbundle.bundle.io import read_directory, write_directory
from textbundle.config import resolve_scratch_dir
from textbundle.core.classify import BundleKind, classify_bundle_kind
from textbundle.core.layout import ARCHIVE_EXTENSION, BUNDLE_EXTENSION
from textbundle.core.model import Document, DocumentRepresentable, as_document
from textbundle.errors import InvalidFormatError

logger = logging.getLogger(__name__)


def write(
    document: DocumentRepresentable,
    destination_dir: Path | str,
    compressed: bool = False,
    progress: Optional[ProgressSink] = None,
) -> Path:
    """Write `document` under `destination_dir` and return the created path.

    With `compressed`, an existing `<name>.textpack` is refused before anything
    is written, so a failed call leaves no intermediate directory behind.
    """
    doc = as_document(document)
    destination_dir = Path(destination_dir)
    if compressed:
        archive_path = destination_dir / f"{doc.name}{ARCHIVE_EXTENSION}"
        if archive_path.exists():
            raise FileExistsError(f"archive already exists: {archive_path}")

    bundle_path = write_directory(doc, destination_dir)
    if not compressed:
        return bundle_path

    archive_path = archive(bundle_path, progress=progress)
    shutil.rmtree(bundle_path)
    logger.debug("removed intermediate bundle %s", bundle_path)
    return archive_path


def pack(
    document: DocumentRepresentable,
    destination_dir: Path | str,
    progress: Optional[ProgressSink] = None,
) -> Path:
    """Write `document` as a `.textpack` archive."""
    return write(document, destination_dir, compressed=True, progress=progress)


def unpack(archive_path: Path | str, scratch_dir: Optional[Path | str] = None) -> Path:
    """Extract a `.textpack` into the scratch directory and return the bundle directory."""
    p = Path(archive_path)
    if classify_bundle_kind(p) is not BundleKind.ARCHIVE:
        raise InvalidFormatError(f"expected a {ARCHIVE_EXTENSION} file: {p}")
    return unarchive(p, resolve_scratch_dir(scratch_dir))


def read(path: Path | str, scratch_dir: Optional[Path | str] = None) -> Document:
    """Read a `.textbundle` directory or `.textpack` archive into a `Document`.

    Raises:
        InvalidFormatError: unrecognized extension or malformed bundle contents.
        ConversionError: an archive held no bundle directory.
    """
    p = Path(path)
    kind = classify_bundle_kind(p)
    if kind is BundleKind.DIRECTORY:
        return read_directory(p)
    if kind is BundleKind.ARCHIVE:
        return read_directory(unarchive(p, resolve_scratch_dir(scratch_dir)))
    raise InvalidFormatError(
        f"unrecognized bundle extension {p.suffix!r}: expected {BUNDLE_EXTENSION} or {ARCHIVE_EXTENSION}"
    )


__all__ = [
    "pack",
    "read",
    "unpack",
    "write",
]
