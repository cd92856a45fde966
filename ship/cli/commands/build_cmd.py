"""Build command - run the Flutter release assembly."""

from __future__ import annotations

import typer

from ship.cli.commands._helpers import DRY_RUN_HELP, exit_on_error
from ship.cli.context import build_context
from ship.services.build import assemble_release


def build(
    build_name: str | None = typer.Option(
        None, "--build-name", help="Override the version name passed to flutter"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> None:
    """Build the release APK (flutter build apk --release)."""
    ctx = build_context()
    result = assemble_release(
        ctx.project, console=ctx.console, build_name=build_name, dry_run=dry_run
    )
    exit_on_error(result, ctx)
    if not dry_run:
        ctx.console.success(str(ctx.release(version=build_name).release_artifact))
