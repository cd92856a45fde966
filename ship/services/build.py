"""Release assembly.

Runs ``flutter build apk --release`` for the project. Signing and SDK
selection are entirely up to the Flutter Gradle plugin; this module only
cares that a zero exit status means ``app-release.apk`` was written.
"""

from __future__ import annotations

from shutil import which

from ship.core.project import Project
from ship.core.result import Err, Ok, Result
from ship.output.console import ConsoleProtocol, Style
from ship.platform.process import run_silent
from ship.services.errors import BuildFailed, ShipError, ToolMissing

FLUTTER = "flutter"


def build_command(*, build_name: str | None = None) -> list[str]:
    cmd = [FLUTTER, "build", "apk", "--release"]
    if build_name:
        cmd += ["--build-name", build_name]
    return cmd


def assemble_release(
    project: Project,
    *,
    console: ConsoleProtocol,
    build_name: str | None = None,
    dry_run: bool = False,
) -> Result[None, ShipError]:
    if not dry_run and which(FLUTTER) is None:
        return Err(
            ToolMissing(
                tool_id=FLUTTER,
                hint="Install the Flutter SDK and add flutter/bin to PATH",
            )
        )

    cmd = build_command(build_name=build_name)
    console.print(" ".join(cmd), Style.DIM)
    if dry_run:
        return Ok(None)

    result = run_silent(cmd, cwd=project.root)
    if isinstance(result, Err):
        return Err(BuildFailed(returncode=result.error.returncode))
    return Ok(None)
