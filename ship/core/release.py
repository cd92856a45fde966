"""Explicit release parameters.

Everything the pipeline steps need is carried in ``ReleaseConfig`` instead
of being read from ambient build state, so each step can be called (and
tested) on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import (
    DEFAULT_ARTIFACT_PREFIX,
    DEFAULT_PUBLIC_URL,
    DEFAULT_REMOTE_DIR,
    DEFAULT_REMOTE_HOST,
    DEFAULT_REMOTE_USER,
    Config,
)
from .project import Project
from .version import resolve_version

__all__ = ["ReleaseConfig", "RELEASE_APK_NAME", "APK_OUTPUT_SUBDIR"]

RELEASE_APK_NAME = "app-release.apk"
APK_OUTPUT_SUBDIR = ("outputs", "flutter-apk")


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Parameters for one packaging/deployment run.

    Attributes:
        version: Version name embedded in the artifact file name.
        build_output_dir: Gradle build dir of the app module (``build/app``).
        remote_host: Host receiving the artifact over scp.
        remote_dir: Absolute directory on the remote host.
        remote_user: Login on the remote host.
        public_url: Base URL the remote directory is served from.
        artifact_prefix: File name prefix (``leggio``).
        timeout: Optional upper bound in seconds for the remote copy.
    """

    version: str
    build_output_dir: Path
    remote_host: str = DEFAULT_REMOTE_HOST
    remote_dir: str = DEFAULT_REMOTE_DIR
    remote_user: str = DEFAULT_REMOTE_USER
    public_url: str = DEFAULT_PUBLIC_URL
    artifact_prefix: str = DEFAULT_ARTIFACT_PREFIX
    timeout: float | None = None

    @classmethod
    def for_project(
        cls,
        project: Project,
        config: Config,
        *,
        version: str | None = None,
    ) -> ReleaseConfig:
        """Build the release parameters for a project.

        ``version`` overrides the project's own version name; the version is
        resolved here, once, when the step runs.
        """
        deploy = config.deploy
        return cls(
            version=resolve_version(project, explicit=version),
            build_output_dir=project.resolve(config.build.output_dir),
            remote_host=deploy.host,
            remote_dir=deploy.dir,
            remote_user=deploy.user,
            public_url=deploy.public_url,
            artifact_prefix=config.app.name,
            timeout=float(deploy.timeout) if deploy.timeout is not None else None,
        )

    @property
    def apk_dir(self) -> Path:
        return self.build_output_dir.joinpath(*APK_OUTPUT_SUBDIR)

    @property
    def release_artifact(self) -> Path:
        """Unversioned APK produced by the release build."""
        return self.apk_dir / RELEASE_APK_NAME

    @property
    def versioned_name(self) -> str:
        return f"{self.artifact_prefix}-{self.version}.apk"

    @property
    def versioned_artifact(self) -> Path:
        return self.apk_dir / self.versioned_name

    @property
    def remote_destination(self) -> str:
        """scp destination, ``user@host:/remote/dir/<file>``."""
        remote_dir = self.remote_dir.rstrip("/")
        return f"{self.remote_user}@{self.remote_host}:{remote_dir}/{self.versioned_name}"

    @property
    def download_url(self) -> str:
        return f"{self.public_url.rstrip('/')}/{self.versioned_name}"
