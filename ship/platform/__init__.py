"""Platform helpers: subprocesses and filesystem."""

from .files import atomic_copy
from .process import ProcessError, run_silent

__all__ = ["ProcessError", "atomic_copy", "run_silent"]
