"""Result type for expected failures.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising, so the
CLI layer decides how each failure is printed and which exit code it maps to.

    match rename_artifact(config, console=console):
        case Ok(None):
            pass  # nothing to package yet
        case Ok(path):
            print(path)
        case Err(error):
            print_ship_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
