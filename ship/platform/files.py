"""Filesystem helpers."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

__all__ = ["atomic_copy"]


def atomic_copy(src: Path, dst: Path) -> None:
    """Copy src to dst through a temp file + replace, overwriting dst.

    dst is either the previous file or a complete copy, never a partial one,
    and carries the permission bits of src (mkstemp alone would leave 0600).
    Errors (missing src, permissions, disk full) propagate as OSError.
    """
    dst.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{dst.name}.",
        suffix=".tmp",
        dir=str(dst.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "wb") as handle, src.open("rb") as source:
            shutil.copyfileobj(source, handle, 1024 * 1024)
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(src, tmp_path)
        os.replace(tmp_path, dst)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
