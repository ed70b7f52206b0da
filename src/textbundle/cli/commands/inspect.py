"""`textbundle inspect` command.

Reads a `.textbundle` directory or `.textpack` archive and prints a stable
JSON summary:

{
  "asset_names": [...],
  "metadata": {... info.json fields ...},
  "name": "...",
  "text_chars": 123
}

Read failures exit with code 2.
"""

from __future__ import annotations

import json
import zipfile
from pathlib import Path
from typing import Optional

import typer

from textbundle.api import read
from textbundle.config import SCRATCH_DIR_ENV
from textbundle.errors import TextBundleError
from textbundle.io.metadata import metadata_to_json_dict


def register(app: typer.Typer) -> None:
    @app.command("inspect")
    def inspect(
        path: str = typer.Argument(..., help="Path to a .textbundle directory or .textpack file."),
        scratch_dir: Optional[str] = typer.Option(
            None,
            "--scratch-dir",
            envvar=SCRATCH_DIR_ENV,
            help="Directory archives are extracted into (default: <tmp>/textbundle).",
        ),
    ) -> None:
        """Print a JSON summary of a bundle."""
        try:
            doc = read(Path(path), scratch_dir=scratch_dir)
        except (TextBundleError, FileNotFoundError, zipfile.BadZipFile) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2) from e

        summary = {
            "name": doc.name,
            "metadata": metadata_to_json_dict(doc.metadata),
            "asset_names": list(doc.asset_names),
            "text_chars": len(doc.text_content),
        }
        typer.echo(json.dumps(summary, indent=2, sort_keys=True))
