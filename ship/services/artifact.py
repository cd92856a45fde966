"""Version-qualify the release APK.

The release build always writes ``app-release.apk``; this step keeps that
file and places a copy named ``<prefix>-<version>.apk`` next to it.
"""

from __future__ import annotations

from pathlib import Path

from ship.core.release import ReleaseConfig
from ship.core.result import Err, Ok, Result
from ship.output.console import ConsoleProtocol, Style
from ship.platform.files import atomic_copy
from ship.services.errors import CopyFailed


def rename_artifact(
    release: ReleaseConfig,
    *,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> Result[Path | None, CopyFailed]:
    """Copy the release APK to its versioned name.

    Returns Ok(None) without touching the disk when there is no release APK
    yet, Ok(path) once the versioned copy exists.
    """
    src = release.release_artifact
    if not src.is_file():
        return Ok(None)

    dst = release.versioned_artifact
    if dry_run:
        console.print(f"copy {src} -> {dst}", Style.DIM)
        return Ok(dst)

    try:
        atomic_copy(src, dst)
    except OSError as e:
        return Err(CopyFailed(src=src, dst=dst, reason=e.strerror or str(e)))

    console.success(f"APK copied to: {release.versioned_name}")
    return Ok(dst)
