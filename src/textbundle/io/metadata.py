"""`info.json` metadata codec (TextBundle version 2).

Schema:
{
  "version": 2,
  "type": "net.daringfireball.markdown",
  "transient": false,
  "creatorURL": "https://example.com/app",
  "creatorIdentifier": "com.example.app",
  "sourceURL": "https://example.com/post"
}

Rules:
- Writer is canonical: compact separators, keys in the order above, optional
  provenance keys omitted when unset, UTF-8.
- Reader requires `version` and `type`; `transient` and provenance keys are
  optional (`transient` null/absent -> false).
- Unknown keys are ignored so newer writers stay readable.
- Asset write order is kept under this library's own namespace key,
  `{"org.python.textbundle": {"assetOrder": ["zebra.png", "apple.png"]}}`,
  written only when the bundle has assets. Other readers ignore it; a missing
  or malformed entry just means "no recorded order".
- Every decode failure raises `MetadataFormatError` naming the offending field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from textbundle.core.layout import ASSET_ORDER_KEY, INFO_FILE_NAME, PRIVATE_NAMESPACE_KEY
from textbundle.core.model import Metadata
from textbundle.errors import MetadataFormatError


_MISSING = object()

# JSON key -> Metadata attribute, in canonical write order.
_PROVENANCE_KEYS = (
    ("creatorURL", "creator_url"),
    ("creatorIdentifier", "creator_identifier"),
    ("sourceURL", "source_url"),
)


def _require_dict(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MetadataFormatError(f"{where}: expected JSON object, got {type(value).__name__}")
    return value


def _require_int(value: Any, *, where: str) -> int:
    # Explicitly reject booleans (Python bool is a subclass of int).
    if isinstance(value, bool) or not isinstance(value, int):
        raise MetadataFormatError(f"{where}: expected int, got {type(value).__name__}")
    return value


def _require_str(value: Any, *, where: str) -> str:
    if not isinstance(value, str):
        raise MetadataFormatError(f"{where}: expected str, got {type(value).__name__}")
    return value


def _optional_bool(value: Any, *, where: str) -> bool:
    if value is _MISSING or value is None:
        return False
    if not isinstance(value, bool):
        raise MetadataFormatError(f"{where}: expected bool, got {type(value).__name__}")
    return value


def _optional_str(value: Any, *, where: str) -> str | None:
    if value is _MISSING or value is None:
        return None
    if not isinstance(value, str):
        raise MetadataFormatError(f"{where}: expected str, got {type(value).__name__}")
    return value


def metadata_to_json_dict(meta: Metadata) -> dict[str, Any]:
    """Convert `Metadata` to a JSON-ready dict in canonical key order."""
    out: dict[str, Any] = {
        "version": meta.version,
        "type": meta.type,
        "transient": bool(meta.transient),
    }
    for key, attr in _PROVENANCE_KEYS:
        value = getattr(meta, attr)
        if value is not None:
            out[key] = value
    return out


def metadata_from_json_dict(obj: Any) -> Metadata:
    """Build `Metadata` from a decoded JSON value, ignoring unknown keys."""
    data = _require_dict(obj, where=INFO_FILE_NAME)

    version = data.get("version", _MISSING)
    if version is _MISSING:
        raise MetadataFormatError(f"{INFO_FILE_NAME}: missing required key 'version'")
    type_ = data.get("type", _MISSING)
    if type_ is _MISSING:
        raise MetadataFormatError(f"{INFO_FILE_NAME}: missing required key 'type'")

    provenance = {
        attr: _optional_str(data.get(key, _MISSING), where=f"{INFO_FILE_NAME}.{key}")
        for key, attr in _PROVENANCE_KEYS
    }
    return Metadata(
        version=_require_int(version, where=f"{INFO_FILE_NAME}.version"),
        type=_require_str(type_, where=f"{INFO_FILE_NAME}.type"),
        transient=_optional_bool(data.get("transient", _MISSING), where=f"{INFO_FILE_NAME}.transient"),
        **provenance,
    )


def asset_order_from_json_dict(obj: Any) -> list[str] | None:
    """Return the recorded asset write order, or None when absent or malformed."""
    if not isinstance(obj, dict):
        return None
    section = obj.get(PRIVATE_NAMESPACE_KEY)
    if not isinstance(section, dict):
        return None
    order = section.get(ASSET_ORDER_KEY)
    if not isinstance(order, list) or not all(isinstance(x, str) for x in order):
        return None
    return list(order)


def encode_metadata(meta: Metadata, *, asset_order: Sequence[str] | None = None) -> bytes:
    """Serialize `meta` to canonical `info.json` bytes.

    A non-empty `asset_order` is recorded under the private namespace key.
    """
    obj = metadata_to_json_dict(meta)
    if asset_order:
        obj[PRIVATE_NAMESPACE_KEY] = {ASSET_ORDER_KEY: list(asset_order)}
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8")


def _load_json(payload: bytes | str) -> Any:
    if isinstance(payload, (bytes, bytearray)):
        try:
            text = bytes(payload).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MetadataFormatError(f"{INFO_FILE_NAME}: not valid UTF-8") from e
    else:
        text = payload
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataFormatError(f"{INFO_FILE_NAME}: malformed JSON ({e.msg} at line {e.lineno})") from e
    return obj


def decode_metadata(payload: bytes | str) -> Metadata:
    """Parse `info.json` bytes (or text) into `Metadata`.

    Raises:
        MetadataFormatError: payload is not UTF-8, not JSON, not an object, or a
            known field is missing/mistyped.
    """
    return metadata_from_json_dict(_load_json(payload))


def decode_info(payload: bytes | str) -> tuple[Metadata, list[str] | None]:
    """Like `decode_metadata`, also returning the recorded asset order (or None)."""
    obj = _load_json(payload)
    return metadata_from_json_dict(obj), asset_order_from_json_dict(obj)


def read_metadata_json(path: str | Path) -> Metadata:
    """Read and decode an `info.json` file."""
    return decode_metadata(Path(path).read_bytes())


def write_metadata_json(meta: Metadata, path: str | Path) -> None:
    """Write canonical `info.json` bytes to `path`."""
    Path(path).write_bytes(encode_metadata(meta))


__all__ = [
    "asset_order_from_json_dict",
    "decode_info",
    "decode_metadata",
    "encode_metadata",
    "metadata_from_json_dict",
    "metadata_to_json_dict",
    "read_metadata_json",
    "write_metadata_json",
]
