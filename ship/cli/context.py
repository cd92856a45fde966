from __future__ import annotations

from dataclasses import dataclass

import typer

from ship.core.config import Config, load_config_or_default
from ship.core.errors import ErrorCode
from ship.core.project import Project, detect_project
from ship.core.release import ReleaseConfig
from ship.core.result import Err
from ship.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol

    def release(self, *, version: str | None = None) -> ReleaseConfig:
        return ReleaseConfig.for_project(self.project, self.config, version=version)


def build_context() -> CLIContext:
    project_result = detect_project()
    if isinstance(project_result, Err):
        typer.echo(f"error: {project_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    project = project_result.value
    config_result = load_config_or_default(project.config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        project=project,
        config=config_result.value,
        console=RichConsole(),
    )
