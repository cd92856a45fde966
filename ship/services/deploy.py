"""Publish the versioned APK to the download host.

The transfer is a plain ``scp`` relying on SSH credentials already set up
for the remote user. The download URL is announced only after scp exited
with status 0.
"""

from __future__ import annotations

from shutil import which

from ship.core.release import ReleaseConfig
from ship.core.result import Err, Ok, Result
from ship.output.console import ConsoleProtocol, Style
from ship.platform.process import run_silent
from ship.services.errors import ShipError, ToolMissing, TransferFailed

SCP = "scp"


def scp_command(release: ReleaseConfig) -> list[str]:
    return [SCP, str(release.versioned_artifact), release.remote_destination]


def deploy_artifact(
    release: ReleaseConfig,
    *,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> Result[str, ShipError]:
    """Copy the versioned APK to the remote host and return its public URL.

    The local file is not checked first; a missing file surfaces as an scp
    failure.
    """
    if not dry_run and which(SCP) is None:
        return Err(ToolMissing(tool_id=SCP, hint="Install an OpenSSH client"))

    cmd = scp_command(release)
    console.print(" ".join(cmd), Style.DIM)
    if dry_run:
        console.info(f"would deploy: {release.download_url}")
        return Ok(release.download_url)

    result = run_silent(cmd, timeout=release.timeout)
    if isinstance(result, Err):
        e = result.error
        return Err(
            TransferFailed(
                destination=release.remote_destination,
                returncode=e.returncode,
                reason=e.stderr,
            )
        )

    console.success(f"Deployed: {release.download_url}")
    return Ok(release.download_url)
