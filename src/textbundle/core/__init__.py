"""TextBundle core: layout constants, data model and classifiers.

This package is intentionally standalone and must not import io/bundle/cli
to avoid circular dependencies.
"""

from __future__ import annotations

from .classify import BundleKind, SchemeClass, classify_bundle_kind, classify_scheme, classify_url
from .layout import (
    ARCHIVE_EXTENSION,
    ASSETS_DIR_NAME,
    BUNDLE_EXTENSION,
    CURRENT_VERSION,
    DEFAULT_TYPE,
    INFO_FILE_NAME,
    TEXT_FILE_NAME,
    TEXT_FILE_PREFIX,
    BundleType,
)
from .model import Document, DocumentRepresentable, Metadata, as_document

__all__ = [
    "ARCHIVE_EXTENSION",
    "ASSETS_DIR_NAME",
    "BUNDLE_EXTENSION",
    "CURRENT_VERSION",
    "DEFAULT_TYPE",
    "INFO_FILE_NAME",
    "TEXT_FILE_NAME",
    "TEXT_FILE_PREFIX",
    "BundleType",
    "BundleKind",
    "SchemeClass",
    "classify_bundle_kind",
    "classify_scheme",
    "classify_url",
    "Document",
    "DocumentRepresentable",
    "Metadata",
    "as_document",
]
