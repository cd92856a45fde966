"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from ship.core.result import Err, Result
from ship.output.errors import print_ship_error, ship_error_exit_code
from ship.services.errors import ShipError

if TYPE_CHECKING:
    from ship.cli.context import CLIContext

T = TypeVar("T")


def exit_on_error(result: Result[T, ShipError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_ship_error(result.error, ctx.console)
        raise typer.Exit(code=ship_error_exit_code(result.error))
    return result.value


VERSION_HELP = "Version name to embed (default: from android/local.properties or pubspec.yaml)"
DRY_RUN_HELP = "Print actions without modifying anything"
