"""`textbundle unpack` command: extract a .textpack and print the bundle path."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Optional

import typer

from textbundle.api import unpack as unpack_archive
from textbundle.config import SCRATCH_DIR_ENV
from textbundle.errors import TextBundleError


def register(app: typer.Typer) -> None:
    @app.command("unpack")
    def unpack(
        archive_path: str = typer.Argument(..., help="Path to a .textpack file."),
        scratch_dir: Optional[str] = typer.Option(
            None,
            "--scratch-dir",
            envvar=SCRATCH_DIR_ENV,
            help="Directory to extract into (default: <tmp>/textbundle).",
        ),
    ) -> None:
        """Extract a .textpack into the scratch directory."""
        try:
            bundle_dir = unpack_archive(Path(archive_path), scratch_dir=scratch_dir)
        except (TextBundleError, FileNotFoundError, zipfile.BadZipFile) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2) from e

        typer.echo(str(bundle_dir))
