"""Bundle directory save/load for TextBundle version 2.

A bundle is a folder named `<name>.textbundle/` containing:
- info.json       metadata record (see `textbundle.io.metadata`)
- text.markdown   document body, UTF-8
- assets/         flat directory of asset files, original names preserved

Reading is lenient about optional parts: `assets/` may be absent, and the
text file may carry a type-specific extension (`text.txt`, `text.html`, ...)
as written by older producers. Only `info.json` and the text file are
mandatory.

Assets come back in write order, which `write_directory` records in
info.json; files the record does not mention (or bundles without a record)
follow in file-name order.

Writing never overwrites: an existing `<name>.textbundle` or a duplicate
asset file name is an error. A failed write may leave a partial directory.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from textbundle.core.layout import (
    ASSETS_DIR_NAME,
    BUNDLE_EXTENSION,
    INFO_FILE_NAME,
    TEXT_FILE_NAME,
    TEXT_FILE_PREFIX,
)
from textbundle.core.model import Document, DocumentRepresentable, as_document
from textbundle.errors import InvalidDirectoryError, InvalidFormatError
from textbundle.io.metadata import decode_info, encode_metadata

logger = logging.getLogger(__name__)


def _write_text_exact(path: Path, text: str) -> None:
    # newline="" prevents Python from translating newlines on write
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def bundle_name(bundle_path: Path) -> str:
    """Document name for a bundle directory: its base name without extension."""
    name = bundle_path.name
    if name.lower().endswith(BUNDLE_EXTENSION):
        return name[: -len(BUNDLE_EXTENSION)]
    return bundle_path.stem


def find_text_file(bundle_path: Path) -> Path | None:
    """Locate the text file: `text.markdown`, else the first `text.*` file by name."""
    canonical = bundle_path / TEXT_FILE_NAME
    if canonical.is_file():
        return canonical
    candidates = sorted(
        p for p in bundle_path.iterdir() if p.is_file() and p.name.startswith(TEXT_FILE_PREFIX)
    )
    return candidates[0] if candidates else None


def list_assets(bundle_path: Path, order: Sequence[str] | None = None) -> list[Path]:
    """List files directly under `assets/`, hidden entries skipped.

    Files named in `order` come first, in that order; the rest follow sorted by
    name. A missing assets directory yields an empty list.
    """
    assets_dir = bundle_path / ASSETS_DIR_NAME
    if not assets_dir.is_dir():
        return []
    by_name = sorted(
        (p for p in assets_dir.iterdir() if p.is_file() and not _is_hidden(p)),
        key=lambda p: p.name,
    )
    if not order:
        return by_name
    rank = {name: i for i, name in reversed(list(enumerate(order)))}
    return sorted(by_name, key=lambda p: rank.get(p.name, len(rank)))


def write_directory(document: DocumentRepresentable, destination_dir: Path) -> Path:
    """Write `document` as `<destination_dir>/<name>.textbundle` and return its path.

    Raises:
        InvalidDirectoryError: destination_dir is missing or not a directory.
        FileExistsError: the bundle directory, or an asset name inside assets/,
            already exists.
        FileNotFoundError: a source asset does not exist.
    """
    doc = as_document(document)
    destination_dir = Path(destination_dir)
    if not destination_dir.is_dir():
        raise InvalidDirectoryError(f"destination is not an existing directory: {destination_dir}")

    root = destination_dir / f"{doc.name}{BUNDLE_EXTENSION}"
    root.mkdir(parents=False, exist_ok=False)

    # ---- info.json + text ----
    (root / INFO_FILE_NAME).write_bytes(encode_metadata(doc.metadata, asset_order=doc.asset_names))
    _write_text_exact(root / TEXT_FILE_NAME, doc.text_content)

    # ---- assets (input order, no overwrite) ----
    assets_dir = root / ASSETS_DIR_NAME
    assets_dir.mkdir()
    for src in doc.asset_paths:
        dest = assets_dir / src.name
        if dest.exists():
            raise FileExistsError(f"duplicate asset name in {ASSETS_DIR_NAME}/: {src.name}")
        shutil.copy2(src, dest)
        logger.debug("copied asset %s -> %s", src, dest)

    logger.debug("wrote bundle %s (%d assets)", root, len(doc.asset_paths))
    return root


def read_directory(bundle_path: Path) -> Document:
    """Read a bundle directory into a `Document`.

    Raises:
        InvalidFormatError: bundle_path is not a directory, or info.json / the
            text file is missing or undecodable.
    """
    root = Path(bundle_path)
    if not root.is_dir():
        raise InvalidFormatError(f"not a bundle directory: {root}")

    info_path = root / INFO_FILE_NAME
    if not info_path.is_file():
        raise InvalidFormatError(f"{root}: missing {INFO_FILE_NAME}")
    # MetadataFormatError is an InvalidFormatError; let it through unchanged.
    metadata, asset_order = decode_info(info_path.read_bytes())

    text_path = find_text_file(root)
    if text_path is None:
        raise InvalidFormatError(f"{root}: missing {TEXT_FILE_NAME}")
    try:
        # newline="" keeps the body byte-exact (no universal-newline translation).
        with text_path.open("r", encoding="utf-8", newline="") as f:
            text_content = f.read()
    except UnicodeDecodeError as e:
        raise InvalidFormatError(f"{text_path.name}: not valid UTF-8") from e

    assets = list_assets(root, asset_order)
    logger.debug("read bundle %s (%d assets)", root, len(assets))

    try:
        return Document(
            name=bundle_name(root),
            text_content=text_content,
            asset_paths=assets,
            metadata=metadata,
        )
    except ValueError as e:
        raise InvalidFormatError(f"{root}: {e}") from e
