"""Typed loading of ``ship.toml``.

The file is optional. Every key has a default matching the Leggio release
setup, so a bare Flutter checkout can be shipped without any config.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "AppConfig",
    "BuildConfig",
    "Config",
    "ConfigError",
    "DeployConfig",
    "load_config",
    "load_config_or_default",
    "DEFAULT_ARTIFACT_PREFIX",
    "DEFAULT_BUILD_OUTPUT_DIR",
    "DEFAULT_REMOTE_USER",
    "DEFAULT_REMOTE_HOST",
    "DEFAULT_REMOTE_DIR",
    "DEFAULT_PUBLIC_URL",
]

DEFAULT_ARTIFACT_PREFIX = "leggio"
DEFAULT_BUILD_OUTPUT_DIR = "build/app"

DEFAULT_REMOTE_USER = "chuck"
DEFAULT_REMOTE_HOST = "teutonia.kreilos.fr"
DEFAULT_REMOTE_DIR = "/var/www/android"
DEFAULT_PUBLIC_URL = "https://android.kreilos.fr"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when ship.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class AppConfig:
    name: str = DEFAULT_ARTIFACT_PREFIX


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Where the Android Gradle build writes its outputs.

    Relative paths are resolved against the project root.
    """

    output_dir: str = DEFAULT_BUILD_OUTPUT_DIR


@dataclass(frozen=True, slots=True)
class DeployConfig:
    """Remote copy destination and public download location."""

    user: str = DEFAULT_REMOTE_USER
    host: str = DEFAULT_REMOTE_HOST
    dir: str = DEFAULT_REMOTE_DIR
    public_url: str = DEFAULT_PUBLIC_URL
    timeout: int | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    app: AppConfig = field(default_factory=AppConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    deploy: DeployConfig = field(default_factory=DeployConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        app: StrDict = get_table(data, "app") or {}
        build: StrDict = get_table(data, "build") or {}
        deploy: StrDict = get_table(data, "deploy") or {}

        timeout = get_int(deploy, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"deploy.timeout must be positive, got {timeout}")

        return cls(
            app=AppConfig(name=get_str(app, "name") or DEFAULT_ARTIFACT_PREFIX),
            build=BuildConfig(output_dir=get_str(build, "output_dir") or DEFAULT_BUILD_OUTPUT_DIR),
            deploy=DeployConfig(
                user=get_str(deploy, "user") or DEFAULT_REMOTE_USER,
                host=get_str(deploy, "host") or DEFAULT_REMOTE_HOST,
                dir=get_str(deploy, "dir") or DEFAULT_REMOTE_DIR,
                public_url=get_str(deploy, "public_url") or DEFAULT_PUBLIC_URL,
                timeout=timeout,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse ship.toml.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the defaults."""
    if not path.exists():
        return Ok(Config())
    return load_config(path)
