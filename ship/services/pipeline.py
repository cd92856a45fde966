"""Release pipeline: build, version-qualify, deploy.

A single forward pass:

    BUILD_PENDING -> BUILD_DONE -> RENAMED | SKIPPED -> DEPLOY_ATTEMPTED -> DONE

Deploy runs after the rename step whether it copied the APK or found
nothing to copy, but never after it failed. Any error stops the chain and
is returned to the caller; nothing is retried or rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from ship.core.config import Config
from ship.core.project import Project
from ship.core.release import ReleaseConfig
from ship.core.result import Err, Ok, Result
from ship.output.console import ConsoleProtocol
from ship.services.artifact import rename_artifact
from ship.services.build import assemble_release
from ship.services.deploy import deploy_artifact
from ship.services.errors import ShipError


class PipelineStage(StrEnum):
    BUILD_PENDING = "build_pending"
    BUILD_DONE = "build_done"
    RENAMED = "renamed"
    SKIPPED = "skipped"
    DEPLOY_ATTEMPTED = "deploy_attempted"
    DONE = "done"


def _no_stages() -> list[PipelineStage]:
    return []


@dataclass(slots=True)
class PipelineReport:
    """Outcome of a completed run.

    Attributes:
        stages: Stages passed through, in order.
        artifact: Versioned APK, or None when the rename step was skipped.
        url: Public download URL announced after the transfer.
    """

    stages: list[PipelineStage] = field(default_factory=_no_stages)
    artifact: Path | None = None
    url: str | None = None

    @property
    def stage(self) -> PipelineStage:
        return self.stages[-1] if self.stages else PipelineStage.BUILD_PENDING

    def advance(self, stage: PipelineStage) -> None:
        self.stages.append(stage)


def package_and_deploy(
    project: Project,
    config: Config,
    *,
    console: ConsoleProtocol,
    version: str | None = None,
    dry_run: bool = False,
    report: PipelineReport | None = None,
) -> Result[PipelineReport, ShipError]:
    """Run the post-build steps (rename, then deploy).

    The version is resolved separately for each step, as each would be if
    invoked on its own.
    """
    report = report if report is not None else PipelineReport(stages=[PipelineStage.BUILD_DONE])

    renamed = rename_artifact(
        ReleaseConfig.for_project(project, config, version=version),
        console=console,
        dry_run=dry_run,
    )
    if isinstance(renamed, Err):
        return renamed

    report.artifact = renamed.value
    report.advance(PipelineStage.SKIPPED if renamed.value is None else PipelineStage.RENAMED)

    report.advance(PipelineStage.DEPLOY_ATTEMPTED)
    deployed = deploy_artifact(
        ReleaseConfig.for_project(project, config, version=version),
        console=console,
        dry_run=dry_run,
    )
    if isinstance(deployed, Err):
        return deployed

    report.url = deployed.value
    report.advance(PipelineStage.DONE)
    return Ok(report)


def run_release(
    project: Project,
    config: Config,
    *,
    console: ConsoleProtocol,
    version: str | None = None,
    build: bool = True,
    dry_run: bool = False,
) -> Result[PipelineReport, ShipError]:
    """Build the release APK (unless ``build`` is False), then package and deploy it."""
    report = PipelineReport()
    if build:
        report.advance(PipelineStage.BUILD_PENDING)
        built = assemble_release(project, console=console, build_name=version, dry_run=dry_run)
        if isinstance(built, Err):
            return built
    report.advance(PipelineStage.BUILD_DONE)

    return package_and_deploy(
        project,
        config,
        console=console,
        version=version,
        dry_run=dry_run,
        report=report,
    )
