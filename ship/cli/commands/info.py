from __future__ import annotations

from ship.cli.context import build_context
from ship.output.console import Style


def info() -> None:
    """Show the resolved project, version, paths and deploy destination."""
    ctx = build_context()
    release = ctx.release()

    rows = [
        ("project", str(ctx.project.root)),
        (
            "config",
            str(ctx.project.config_path) if ctx.project.config_path.exists() else "(defaults)",
        ),
        ("version", release.version),
        ("release apk", str(release.release_artifact)),
        ("versioned apk", str(release.versioned_artifact)),
        ("destination", release.remote_destination),
        ("url", release.download_url),
    ]

    ctx.console.header("Release settings")
    width = max(len(k) for k, _ in rows)
    for key, value in rows:
        ctx.console.print(f"{key.ljust(width)}  {value}")

    if not release.release_artifact.exists():
        ctx.console.print("release apk not built yet", Style.DIM)
