"""Tests for ship.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ship.core.config import (
    DEFAULT_PUBLIC_URL,
    Config,
    DeployConfig,
    load_config,
    load_config_or_default,
)
from ship.core.result import Err, Ok


class TestDefaults:
    def test_deploy_defaults(self) -> None:
        deploy = DeployConfig()
        assert deploy.user == "chuck"
        assert deploy.host == "teutonia.kreilos.fr"
        assert deploy.dir == "/var/www/android"
        assert deploy.public_url == "https://android.kreilos.fr"
        assert deploy.timeout is None

    def test_config_defaults(self) -> None:
        config = Config()
        assert config.app.name == "leggio"
        assert config.build.output_dir == "build/app"

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.app = None  # type: ignore[misc]


class TestFromDict:
    def test_empty_uses_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_partial_override(self) -> None:
        config = Config.from_dict({"deploy": {"host": "example.org", "timeout": 30}})
        assert config.deploy.host == "example.org"
        assert config.deploy.timeout == 30
        assert config.deploy.user == "chuck"
        assert config.deploy.public_url == DEFAULT_PUBLIC_URL

    def test_blank_strings_fall_back(self) -> None:
        config = Config.from_dict({"app": {"name": "   "}})
        assert config.app.name == "leggio"

    def test_wrong_types_ignored(self) -> None:
        config = Config.from_dict({"deploy": "nope", "build": {"output_dir": 3}})
        assert config == Config()

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            Config.from_dict({"deploy": {"timeout": 0}})


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ship.toml"
        path.write_text(
            '[app]\nname = "demo"\n\n[deploy]\nhost = "h.example"\ndir = "/srv/apk"\n',
            encoding="utf-8",
        )

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.app.name == "demo"
        assert result.value.deploy.host == "h.example"
        assert result.value.deploy.dir == "/srv/apk"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "ship.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "ship.toml"
        path.write_text("[deploy\nhost = ", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "ship.toml"
        path.write_text("[deploy]\ntimeout = -5\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_or_default_missing_file(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "ship.toml")

        assert isinstance(result, Ok)
        assert result.value == Config()

    def test_or_default_keeps_parse_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "ship.toml"
        path.write_text("not = [valid", encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)
