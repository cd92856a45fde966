from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ToolMissing:
    tool_id: str
    hint: str


@dataclass(frozen=True, slots=True)
class BuildFailed:
    returncode: int


@dataclass(frozen=True, slots=True)
class CopyFailed:
    src: Path
    dst: Path
    reason: str


@dataclass(frozen=True, slots=True)
class TransferFailed:
    destination: str
    returncode: int
    reason: str = ""


ShipError = ToolMissing | BuildFailed | CopyFailed | TransferFailed
