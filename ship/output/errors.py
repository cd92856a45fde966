"""Error presentation utilities.

Centralized error formatting and exit code mapping for the pipeline
commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from ship.core.errors import ErrorCode
from ship.output.console import Style
from ship.services.errors import (
    BuildFailed,
    CopyFailed,
    ShipError,
    ToolMissing,
    TransferFailed,
)

if TYPE_CHECKING:
    from ship.output.console import ConsoleProtocol

__all__ = ["print_ship_error", "ship_error_exit_code"]


def print_ship_error(error: ShipError, console: ConsoleProtocol) -> None:
    match error:
        case ToolMissing(tool_id=tool_id, hint=hint):
            console.error(f"{tool_id}: missing")
            console.print(f"hint: {hint}", Style.DIM)
        case BuildFailed(returncode=rc):
            console.error(f"release build failed (exit {rc})")
        case CopyFailed(src=src, dst=dst, reason=reason):
            console.error(f"copy failed: {src} -> {dst} ({reason})")
        case TransferFailed(destination=destination, returncode=rc, reason=reason):
            console.error(f"remote copy to {destination} failed (exit {rc})")
            if reason:
                console.print(reason, Style.DIM)


def ship_error_exit_code(error: ShipError) -> int:
    match error:
        case ToolMissing():
            return int(ErrorCode.ENV_ERROR)
        case BuildFailed():
            return int(ErrorCode.BUILD_ERROR)
        case TransferFailed():
            return int(ErrorCode.NETWORK_ERROR)
        case CopyFailed():
            return int(ErrorCode.IO_ERROR)
        case _:
            assert_never(error)
