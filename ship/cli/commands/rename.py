from __future__ import annotations

import typer

from ship.cli.commands._helpers import DRY_RUN_HELP, VERSION_HELP, exit_on_error
from ship.cli.context import build_context
from ship.services.artifact import rename_artifact


def rename(
    version: str | None = typer.Option(None, "--version", "-v", help=VERSION_HELP),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> None:
    """Copy app-release.apk to its versioned name (no-op if not built yet)."""
    ctx = build_context()
    exit_on_error(
        rename_artifact(ctx.release(version=version), console=ctx.console, dry_run=dry_run),
        ctx,
    )
