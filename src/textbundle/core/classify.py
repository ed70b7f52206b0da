"""Pure classifiers for bundle paths and URL schemes.

Neither function touches the filesystem; both are total.
"""

from __future__ import annotations

import os
from enum import Enum, IntEnum
from pathlib import PurePath
from urllib.parse import urlsplit

from .layout import ARCHIVE_EXTENSION, BUNDLE_EXTENSION


class BundleKind(Enum):
    DIRECTORY = "directory"
    ARCHIVE = "archive"
    UNKNOWN = "unknown"


class SchemeClass(IntEnum):
    UNKNOWN = -1
    NONE = 0
    FILESYSTEM = 1
    NETWORK = 2


NETWORK_SCHEMES = frozenset({"http", "https", "ftp", "sftp"})
FILESYSTEM_SCHEMES = frozenset({"file"})


def classify_bundle_kind(path: str | os.PathLike[str]) -> BundleKind:
    """Classify `path` by its lower-cased last extension."""
    suffix = PurePath(os.fspath(path)).suffix.lower()
    if suffix == BUNDLE_EXTENSION:
        return BundleKind.DIRECTORY
    if suffix == ARCHIVE_EXTENSION:
        return BundleKind.ARCHIVE
    return BundleKind.UNKNOWN


def classify_scheme(token: str | None) -> SchemeClass:
    """Classify a URL scheme token.

    "" -> NONE; http/https/ftp/sftp -> NETWORK; file -> FILESYSTEM;
    anything else, including a missing token or a differently-cased one, -> UNKNOWN.
    """
    if token is None:
        return SchemeClass.UNKNOWN
    if token == "":
        return SchemeClass.NONE
    if token in NETWORK_SCHEMES:
        return SchemeClass.NETWORK
    if token in FILESYSTEM_SCHEMES:
        return SchemeClass.FILESYSTEM
    return SchemeClass.UNKNOWN


def classify_url(url: str | os.PathLike[str]) -> SchemeClass:
    """Classify a URL string by its scheme.

    Path objects are local files. A string without a scheme (e.g. `/var/thing`)
    carries no scheme token at all and classifies as UNKNOWN.
    """
    if isinstance(url, os.PathLike):
        return SchemeClass.FILESYSTEM
    scheme = urlsplit(url).scheme
    return classify_scheme(scheme or None)


__all__ = [
    "BundleKind",
    "SchemeClass",
    "classify_bundle_kind",
    "classify_scheme",
    "classify_url",
]
