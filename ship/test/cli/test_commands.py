from __future__ import annotations

from pathlib import Path

import pytest
import typer

from ship.cli.context import CLIContext
from ship.core.config import Config
from ship.core.errors import ErrorCode
from ship.core.project import Project
from ship.core.result import Err, Ok, Result
from ship.output.console import MockConsole
from ship.platform.process import ProcessError
from ship.services import build, deploy


def _ctx(tmp_path: Path) -> CLIContext:
    (tmp_path / "pubspec.yaml").write_text("version: 1.2.3\n", encoding="utf-8")
    return CLIContext(project=Project(root=tmp_path), config=Config(), console=MockConsole())


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def _patch_scp(monkeypatch: pytest.MonkeyPatch, returncode: int) -> list[list[str]]:
    calls: list[list[str]] = []

    def fake_run_silent(
        cmd: list[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Result[None, ProcessError]:
        calls.append(cmd)
        if returncode:
            return Err(ProcessError(tuple(cmd), returncode))
        return Ok(None)

    monkeypatch.setattr(deploy, "which", lambda name: "/usr/bin/scp")
    monkeypatch.setattr(deploy, "run_silent", fake_run_silent)
    return calls


def test_rename_copies_apk(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import ship.cli.commands.rename as rename_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(rename_cmd, "build_context", lambda: ctx)
    apk_dir = ctx.release().apk_dir
    apk_dir.mkdir(parents=True)
    (apk_dir / "app-release.apk").write_bytes(b"apk")

    rename_cmd.rename(version=None, dry_run=False)

    assert (apk_dir / "leggio-1.2.3.apk").read_bytes() == b"apk"
    assert _console(ctx).find("APK copied to: leggio-1.2.3.apk")


def test_rename_without_apk_succeeds_quietly(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import ship.cli.commands.rename as rename_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(rename_cmd, "build_context", lambda: ctx)

    rename_cmd.rename(version="9.9.9", dry_run=False)

    assert _console(ctx).outputs == []


def test_deploy_failure_exits_with_network_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import ship.cli.commands.deploy as deploy_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(deploy_cmd, "build_context", lambda: ctx)
    _patch_scp(monkeypatch, returncode=1)

    with pytest.raises(typer.Exit) as exc:
        deploy_cmd.deploy(version=None, dry_run=False)

    assert exc.value.exit_code == int(ErrorCode.NETWORK_ERROR)
    assert not _console(ctx).find("Deployed")
    assert _console(ctx).has_error()


def test_deploy_success(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import ship.cli.commands.deploy as deploy_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(deploy_cmd, "build_context", lambda: ctx)
    calls = _patch_scp(monkeypatch, returncode=0)

    deploy_cmd.deploy(version="1.0.0", dry_run=False)

    assert calls[0][-1] == "chuck@teutonia.kreilos.fr:/var/www/android/leggio-1.0.0.apk"
    assert _console(ctx).find("Deployed: https://android.kreilos.fr/leggio-1.0.0.apk")


def test_release_skip_build(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import ship.cli.commands.release_cmd as release_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(release_cmd, "build_context", lambda: ctx)
    calls = _patch_scp(monkeypatch, returncode=0)

    release_cmd.release(version=None, skip_build=True, dry_run=False)

    assert [c[0] for c in calls] == ["scp"]
    assert _console(ctx).find("build_done -> skipped -> deploy_attempted -> done")


def test_release_missing_flutter_exits_env_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import ship.cli.commands.release_cmd as release_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(release_cmd, "build_context", lambda: ctx)
    monkeypatch.setattr(build, "which", lambda name: None)

    with pytest.raises(typer.Exit) as exc:
        release_cmd.release(version=None, skip_build=False, dry_run=False)

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
    assert _console(ctx).find("error: flutter: missing")


def test_info_shows_destination(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import ship.cli.commands.info as info_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(info_cmd, "build_context", lambda: ctx)

    info_cmd.info()

    text = _console(ctx).text
    assert "1.2.3" in text
    assert "chuck@teutonia.kreilos.fr:/var/www/android/leggio-1.2.3.apk" in text
    assert "(defaults)" in text
    assert "release apk not built yet" in text


def test_build_dry_run_reports_no_artifact(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import ship.cli.commands.build_cmd as build_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(build_cmd, "build_context", lambda: ctx)
    monkeypatch.setattr(build, "which", lambda name: None)

    build_cmd.build(build_name=None, dry_run=True)

    assert _console(ctx).messages == ["flutter build apk --release"]
    assert not _console(ctx).has_success()
