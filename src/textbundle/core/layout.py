"""On-disk layout constants for TextBundle version 2.

    <name>.textbundle/
      info.json
      text.markdown
      assets/

The compressed form is a zip of that tree named `<name>.textpack`.
"""

from __future__ import annotations

from enum import Enum

CURRENT_VERSION = 2

BUNDLE_EXTENSION = ".textbundle"
ARCHIVE_EXTENSION = ".textpack"

INFO_FILE_NAME = "info.json"
TEXT_FILE_NAME = "text.markdown"
# Older writers name the text file after the document type (text.txt, text.html, ...).
TEXT_FILE_PREFIX = "text."
ASSETS_DIR_NAME = "assets"

# info.json section owned by this library; holds {"assetOrder": [file names in write order]}.
PRIVATE_NAMESPACE_KEY = "org.python.textbundle"
ASSET_ORDER_KEY = "assetOrder"


class BundleType(str, Enum):
    """Well-known values for the metadata `type` field.

    Metadata stores `type` as free text; these are the identifiers readers are
    expected to recognise.
    """

    MARKDOWN = "net.daringfireball.markdown"
    PLAIN_TEXT = "public.plain-text"
    HTML = "public.html"
    PACKAGE = "com.apple.package"


DEFAULT_TYPE = BundleType.MARKDOWN.value


__all__ = [
    "ARCHIVE_EXTENSION",
    "ASSETS_DIR_NAME",
    "ASSET_ORDER_KEY",
    "BUNDLE_EXTENSION",
    "BundleType",
    "CURRENT_VERSION",
    "DEFAULT_TYPE",
    "INFO_FILE_NAME",
    "PRIVATE_NAMESPACE_KEY",
    "TEXT_FILE_NAME",
    "TEXT_FILE_PREFIX",
]
