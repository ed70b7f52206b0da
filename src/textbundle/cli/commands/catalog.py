"""`textbundle catalog` command: tabulate the bundles in a directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from textbundle.catalog import catalog_bundles, write_catalog_csv


def register(app: typer.Typer) -> None:
    @app.command("catalog")
    def catalog(
        root: str = typer.Argument(..., help="Directory to scan (top level only)."),
        csv: Optional[str] = typer.Option(None, "--csv", help="Write the table to this CSV path instead of stdout."),
    ) -> None:
        """List .textbundle/.textpack entries with their metadata."""
        root_p = Path(root)
        if not root_p.is_dir():
            raise typer.BadParameter(f"not a directory: {root_p}")

        df = catalog_bundles(root_p)
        if csv:
            write_catalog_csv(df, Path(csv))
            typer.echo(csv)
            return
        if df.empty:
            typer.echo("no bundles found")
            return
        typer.echo(df.to_string(index=False))
