from __future__ import annotations

import typer

from ship.cli.commands._helpers import DRY_RUN_HELP, VERSION_HELP, exit_on_error
from ship.cli.context import build_context
from ship.services.deploy import deploy_artifact


def deploy(
    version: str | None = typer.Option(None, "--version", "-v", help=VERSION_HELP),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> None:
    """Copy the versioned APK to the download host over scp."""
    ctx = build_context()
    exit_on_error(
        deploy_artifact(ctx.release(version=version), console=ctx.console, dry_run=dry_run),
        ctx,
    )
