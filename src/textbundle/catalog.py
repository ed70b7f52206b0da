"""Tabular inventory of the bundles found in a directory.

One row per top-level `.textbundle` directory or `.textpack` file:

    name, kind, path, version, type, transient, assets, text_chars, error

Archives are summarized from the zip listing and embedded `info.json`
without extracting them. Entries that fail to read produce a row with
`error` set instead of aborting the scan.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any

from textbundle.bundle.io import read_directory
from textbundle.core.classify import BundleKind, classify_bundle_kind
from textbundle.core.layout import ASSETS_DIR_NAME, BUNDLE_EXTENSION, INFO_FILE_NAME, TEXT_FILE_NAME, TEXT_FILE_PREFIX
from textbundle.errors import InvalidFormatError, TextBundleError
from textbundle.io.metadata import decode_metadata

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = ["name", "kind", "path", "version", "type", "transient", "assets", "text_chars", "error"]
# Stored as nullable "Int64"; unreadable rows leave them <NA>.
_INT_COLUMNS = ["version", "assets", "text_chars"]


def _empty_row(path: Path, kind: BundleKind) -> dict[str, Any]:
    name = path.name[: -len(path.suffix)] if path.suffix else path.name
    return {
        "name": name,
        "kind": kind.value,
        "path": str(path),
        "version": None,
        "type": None,
        "transient": None,
        "assets": None,
        "text_chars": None,
        "error": None,
    }


def _directory_row(path: Path) -> dict[str, Any]:
    row = _empty_row(path, BundleKind.DIRECTORY)
    doc = read_directory(path)
    row.update(
        name=doc.name,
        version=doc.metadata.version,
        type=doc.metadata.type,
        transient=doc.metadata.transient,
        assets=len(doc.asset_paths),
        text_chars=len(doc.text_content),
    )
    return row


def _archive_row(path: Path) -> dict[str, Any]:
    row = _empty_row(path, BundleKind.ARCHIVE)
    with zipfile.ZipFile(path, "r") as zf:
        names = [PurePosixPath(n) for n in zf.namelist()]
        tops = sorted({n.parts[0] for n in names if len(n.parts) > 1 and n.parts[0].lower().endswith(BUNDLE_EXTENSION)})
        if not tops:
            raise InvalidFormatError(f"{path.name}: no {BUNDLE_EXTENSION} directory in archive")
        top = tops[0]

        files = {
            PurePosixPath(info.filename).relative_to(top)
            for info in zf.infolist()
            if not info.is_dir() and PurePosixPath(info.filename).parts[0] == top
        }

        info = PurePosixPath(INFO_FILE_NAME)
        if info not in files:
            raise InvalidFormatError(f"{path.name}: missing {INFO_FILE_NAME}")
        meta = decode_metadata(zf.read(str(PurePosixPath(top, info))))

        text_candidates = sorted(
            f for f in files if len(f.parts) == 1 and f.name.startswith(TEXT_FILE_PREFIX)
        )
        text_name = PurePosixPath(TEXT_FILE_NAME) if PurePosixPath(TEXT_FILE_NAME) in files else None
        if text_name is None and text_candidates:
            text_name = text_candidates[0]
        if text_name is None:
            raise InvalidFormatError(f"{path.name}: missing {TEXT_FILE_NAME}")
        try:
            text = zf.read(str(PurePosixPath(top, text_name))).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormatError(f"{path.name}: {text_name}: not valid UTF-8") from e

        assets = [
            f
            for f in files
            if len(f.parts) == 2 and f.parts[0] == ASSETS_DIR_NAME and not f.name.startswith(".")
        ]

    row.update(
        name=top[: -len(BUNDLE_EXTENSION)],
        version=meta.version,
        type=meta.type,
        transient=meta.transient,
        assets=len(assets),
        text_chars=len(text),
    )
    return row


def catalog_bundles(root: Path | str) -> "pd.DataFrame":
    """Scan the top level of `root` and return one catalog row per bundle.

    Rows are sorted by path; columns follow `CATALOG_COLUMNS`.
    """
    import pandas as pd  # local import to keep module import-light

    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"catalog root is not a directory: {root}")

    rows: list[dict[str, Any]] = []
    for entry in sorted(root.iterdir()):
        kind = classify_bundle_kind(entry)
        if kind is BundleKind.UNKNOWN:
            continue
        try:
            row = _directory_row(entry) if kind is BundleKind.DIRECTORY else _archive_row(entry)
        except (TextBundleError, OSError, zipfile.BadZipFile) as e:
            logger.warning("skipping unreadable bundle %s: %s", entry, e)
            row = _empty_row(entry, kind)
            row["error"] = str(e)
        rows.append(row)

    df = pd.DataFrame(rows, columns=CATALOG_COLUMNS)
    df = df.astype({c: "Int64" for c in _INT_COLUMNS})
    return df.sort_values("path", kind="stable").reset_index(drop=True)


def write_catalog_csv(df: "pd.DataFrame", path: Path | str) -> None:
    """Write a catalog table deterministically (no index, `\\n` line endings)."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.loc[:, CATALOG_COLUMNS].to_csv(out_path, index=False, lineterminator="\n")


__all__ = [
    "CATALOG_COLUMNS",
    "catalog_bundles",
    "write_catalog_csv",
]
