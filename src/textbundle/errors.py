"""Typed errors raised by the TextBundle read/write paths.

Everything raised on purpose by this package derives from `TextBundleError`.
Filesystem and archive codec failures (missing asset, disk full, corrupt zip)
are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class TextBundleError(Exception):
    """Base class for TextBundle errors."""


class InvalidDirectoryError(TextBundleError):
    """Destination directory is missing or is not a directory."""


class InvalidFormatError(TextBundleError, ValueError):
    """Path or payload is not a readable TextBundle.

    Raised for an unrecognized extension, a missing/undecodable `info.json`,
    or a missing/non-UTF-8 text file.
    """


class MetadataFormatError(InvalidFormatError):
    """`info.json` could not be decoded into a metadata record."""


class ConversionError(TextBundleError):
    """An archive was extracted but no bundle directory was found inside it."""


__all__ = [
    "ConversionError",
    "InvalidDirectoryError",
    "InvalidFormatError",
    "MetadataFormatError",
    "TextBundleError",
]
