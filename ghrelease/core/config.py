"""Release settings loaded from a TOML file.

Example ``release.toml``::

    [release]
    owner = "breadmoirai"
    repo = "github-release-gradle-plugin"
    tag_name = "v2.0.0"
    draft = true
    assets = ["build/libs/plugin.jar"]
    token_env = "GITHUB_TOKEN"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_list, get_table

if TYPE_CHECKING:
    from ghrelease.settings.container import ReleaseSettings

__all__ = [
    "ConfigError",
    "ReleaseConfig",
    "load_release_config",
]

_TEXT_KEYS = ("owner", "repo", "tag_name", "target_commitish", "release_name", "body")
_FLAG_KEYS = ("draft", "prerelease", "overwrite", "allow_upload_to_existing")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Values read from the ``[release]`` table. Keys absent from the file are omitted."""

    text: Mapping[str, str] = field(default_factory=dict)
    flags: Mapping[str, bool] = field(default_factory=dict)
    assets: tuple[str, ...] | None = None
    token_env: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        release: StrDict = get_table(data, "release") or {}

        text: dict[str, str] = {}
        for key in _TEXT_KEYS:
            value = _get_text(release, key)
            if value is not None:
                text[key] = value

        flags: dict[str, bool] = {}
        for key in _FLAG_KEYS:
            if key not in release:
                continue
            flag = get_bool(release, key)
            if flag is None:
                raise TypeError(f"release.{key} must be a boolean")
            flags[key] = flag

        assets: tuple[str, ...] | None = None
        if "assets" in release:
            items = get_str_list(release, "assets")
            if items is None:
                raise TypeError("release.assets must be a list of paths")
            assets = tuple(items)

        return cls(
            text=text,
            flags=flags,
            assets=assets,
            token_env=_get_text(release, "token_env"),
        )

    def apply_to(self, settings: ReleaseSettings) -> None:
        """Assign the configured values; settings missing from the file are left alone.

        The token is read from the environment only when authorization is resolved.
        """
        for key, value in self.text.items():
            settings.set(key, value)
        for key, flag in self.flags.items():
            settings.set(key, flag)
        if self.assets is not None:
            settings.release_assets = self.assets
        if self.token_env is not None:
            env_name = self.token_env
            settings.set_token(lambda: os.environ.get(env_name) or None)


def _get_text(release: StrDict, key: str) -> str | None:
    """Return a stripped text value; blank strings count as unset."""
    if key in release and not isinstance(release[key], str):
        raise TypeError(f"release.{key} must be a string")
    return get_str(release, key)

def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_release_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load release settings from a TOML file.

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(
            ConfigError(
                f"Invalid config structure: {e}",
                path=path,
                hint="expected text values, boolean flags and a list of asset paths",
            )
        )
