"""Core data model for TextBundle.

- `Metadata`: the versioned `info.json` record.
- `Document`: in-memory form of a bundle (name, text, assets, metadata).
- `DocumentRepresentable`: structural protocol for foreign document types that
  can be written as a bundle without subclassing `Document`.

This module must not import bundle/io/cli.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Protocol, runtime_checkable

from .layout import CURRENT_VERSION, DEFAULT_TYPE


def _norm_str(value: Any, *, where: str) -> str:
    """Normalize a required string: strip and reject empty/whitespace."""
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str, got {type(value).__name__}")
    s = value.strip()
    if not s:
        raise ValueError(f"{where}: must be a non-empty string")
    return s


def _opt_str(value: Any, *, where: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str or None, got {type(value).__name__}")
    return value


def _require_int(value: Any, *, where: str) -> int:
    # bool is a subclass of int; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: expected int, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Metadata:
    """TextBundle metadata record (`info.json`).

    Fields:
      - version: schema version tag (current: 2)
      - type: document type identifier, free text kept verbatim (see `BundleType`)
      - transient: True for temporary/working copies; None is stored as False
      - creator_identifier, creator_url, source_url: optional provenance
    """

    version: int = CURRENT_VERSION
    type: str = DEFAULT_TYPE
    transient: bool = False
    creator_identifier: str | None = None
    creator_url: str | None = None
    source_url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "version", _require_int(self.version, where="Metadata.version"))
        type_value = self.type.value if isinstance(self.type, Enum) else self.type
        if not isinstance(type_value, str):
            raise ValueError(f"Metadata.type: expected str, got {type(type_value).__name__}")
        object.__setattr__(self, "type", type_value)
        if self.transient is None:
            object.__setattr__(self, "transient", False)
        elif not isinstance(self.transient, bool):
            raise ValueError(f"Metadata.transient: expected bool, got {type(self.transient).__name__}")
        for name in ("creator_identifier", "creator_url", "source_url"):
            object.__setattr__(self, name, _opt_str(getattr(self, name), where=f"Metadata.{name}"))


def _norm_name(value: Any) -> str:
    name = _norm_str(value, where="Document.name")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ValueError(f"Document.name: must be a single path component, got {name!r}")
    return name


def _norm_asset_paths(value: Any) -> tuple[Path, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Path)):
        raise ValueError(f"Document.asset_paths: expected a list/tuple, got {type(value).__name__}")
    return tuple(Path(p) for p in value)


@dataclass(frozen=True)
class Document:
    """A text document plus its assets and metadata.

    `name` doubles as the on-disk base name (`<name>.textbundle`), so it must
    be a single non-empty path component. `asset_paths` keeps caller order.
    """

    name: str
    text_content: str
    asset_paths: tuple[Path, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _norm_name(self.name))
        if not isinstance(self.text_content, str):
            raise ValueError(f"Document.text_content: expected str, got {type(self.text_content).__name__}")
        object.__setattr__(self, "asset_paths", _norm_asset_paths(self.asset_paths))
        if self.metadata is None:
            object.__setattr__(self, "metadata", Metadata())
        elif not isinstance(self.metadata, Metadata):
            raise ValueError(f"Document.metadata: expected Metadata, got {type(self.metadata).__name__}")

    @property
    def asset_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.asset_paths)


@runtime_checkable
class DocumentRepresentable(Protocol):
    """Anything exposing the four document attributes can be written as a bundle."""

    name: str
    text_content: str
    asset_paths: Iterable[Path] | None
    metadata: Metadata


def as_document(obj: DocumentRepresentable) -> Document:
    """Convert a conforming value into a concrete `Document` (identity for Documents)."""
    if isinstance(obj, Document):
        return obj
    missing = [a for a in ("name", "text_content", "asset_paths", "metadata") if not hasattr(obj, a)]
    if missing:
        raise TypeError(f"{type(obj).__name__} is not DocumentRepresentable: missing {', '.join(missing)}")
    return Document(
        name=obj.name,
        text_content=obj.text_content,
        asset_paths=obj.asset_paths,
        metadata=obj.metadata,
    )


__all__ = [
    "Document",
    "DocumentRepresentable",
    "Metadata",
    "as_document",
]
