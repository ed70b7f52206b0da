"""`textbundle pack` command.

Builds a bundle from a text file plus asset files:
- the text file becomes `text.markdown`
- each `--asset` is copied into `assets/` in the order given
- `--compressed` (default) produces a `.textpack`, otherwise a `.textbundle`
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from textbundle.api import write
from textbundle.core.layout import DEFAULT_TYPE
from textbundle.core.model import Document, Metadata
from textbundle.errors import TextBundleError


def register(app: typer.Typer) -> None:
    @app.command("pack")
    def pack(
        text_path: str = typer.Argument(..., help="Path to the UTF-8 document body."),
        name: Optional[str] = typer.Option(None, "--name", help="Bundle name (default: text file stem)."),
        out_dir: str = typer.Option(".", "--out-dir", help="Existing directory to write the bundle into."),
        asset: Optional[List[str]] = typer.Option(None, "--asset", help="Asset file to include (repeatable)."),
        doc_type: str = typer.Option(DEFAULT_TYPE, "--type", help="Document type identifier for info.json."),
        source_url: Optional[str] = typer.Option(None, "--source-url", help="Provenance URL for info.json."),
        transient: bool = typer.Option(False, "--transient", help="Mark the bundle as a temporary working copy."),
        compressed: bool = typer.Option(True, "--compressed/--no-compressed", help="Write a .textpack archive."),
    ) -> None:
        """Create a .textpack (or .textbundle) from a text file and assets."""
        text_p = Path(text_path)
        try:
            text = text_p.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise typer.BadParameter(f"{text_p}: not valid UTF-8") from e

        try:
            doc = Document(
                name=name or text_p.stem,
                text_content=text,
                asset_paths=[Path(a) for a in (asset or [])],
                metadata=Metadata(type=doc_type, transient=transient, source_url=source_url),
            )
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        try:
            out = write(doc, Path(out_dir), compressed=compressed)
        except (TextBundleError, FileExistsError, FileNotFoundError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2) from e

        typer.echo(str(out))
