"""Release command - build, version-qualify and deploy in one pass."""

from __future__ import annotations

import typer

from ship.cli.commands._helpers import DRY_RUN_HELP, VERSION_HELP, exit_on_error
from ship.cli.context import build_context
from ship.output.console import Style
from ship.services.pipeline import run_release


def release(
    version: str | None = typer.Option(None, "--version", "-v", help=VERSION_HELP),
    skip_build: bool = typer.Option(
        False, "--skip-build", help="Use the APK from a previous release build"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> None:
    """Build the release APK, copy it to its versioned name and deploy it."""
    ctx = build_context()
    ctx.console.header(f"Release {ctx.project.root.name}")

    report = exit_on_error(
        run_release(
            ctx.project,
            ctx.config,
            console=ctx.console,
            version=version,
            build=not skip_build,
            dry_run=dry_run,
        ),
        ctx,
    )
    ctx.console.print(" -> ".join(str(s) for s in report.stages), Style.DIM)
