"""Version name resolution.

Gradle's ``versionName`` for a Flutter app comes from ``flutter.versionName``
in ``android/local.properties`` (written on every flutter build), which in
turn mirrors the ``version:`` line of ``pubspec.yaml`` without its ``+build``
suffix. When neither is readable the literal ``"unknown"`` is used so the
artifact name stays recognizably wrong instead of failing the release.
"""

from __future__ import annotations

import re
from pathlib import Path

from .project import Project

__all__ = [
    "UNKNOWN_VERSION",
    "read_local_properties_version",
    "read_pubspec_version",
    "resolve_version",
]

UNKNOWN_VERSION = "unknown"

_PUBSPEC_VERSION_RE = re.compile(r"""(?m)^version:\s*["']?([^"'\s#]+)["']?\s*(?:#.*)?$""")


def read_local_properties_version(path: Path) -> str | None:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        key, sep, value = line.partition("=")
        if sep and key.strip() == "flutter.versionName":
            return value.strip() or None
    return None


def read_pubspec_version(path: Path) -> str | None:
    """Read the top-level ``version:`` of pubspec.yaml, minus ``+build``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    m = _PUBSPEC_VERSION_RE.search(text)
    if m is None:
        return None
    name = m.group(1).split("+", 1)[0]
    return name or None


def resolve_version(project: Project, *, explicit: str | None = None) -> str:
    if explicit is not None and explicit.strip():
        return explicit.strip()

    for found in (
        read_local_properties_version(project.local_properties_path),
        read_pubspec_version(project.pubspec_path),
    ):
        if found:
            return found
    return UNKNOWN_VERSION
