"""TextBundle — portable text document + assets container.

Reads and writes the TextBundle v2 format: a `.textbundle` directory
(info.json, text.markdown, assets/) or its zipped `.textpack` form.
"""

from __future__ import annotations

from textbundle.api import pack, read, unpack, write
from textbundle.core import (
    BundleKind,
    BundleType,
    Document,
    DocumentRepresentable,
    Metadata,
    SchemeClass,
    as_document,
    classify_bundle_kind,
    classify_scheme,
    classify_url,
)
from textbundle.errors import (
    ConversionError,
    InvalidDirectoryError,
    InvalidFormatError,
    MetadataFormatError,
    TextBundleError,
)
from textbundle.io import decode_metadata, encode_metadata

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BundleKind",
    "BundleType",
    "ConversionError",
    "Document",
    "DocumentRepresentable",
    "InvalidDirectoryError",
    "InvalidFormatError",
    "Metadata",
    "MetadataFormatError",
    "SchemeClass",
    "TextBundleError",
    "as_document",
    "classify_bundle_kind",
    "classify_scheme",
    "classify_url",
    "decode_metadata",
    "encode_metadata",
    "pack",
    "read",
    "unpack",
    "write",
]
