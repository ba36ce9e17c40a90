"""Snapshot of the resolved settings handed to the release task."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ghrelease.core.result import Err, Ok, Result
from ghrelease.settings.container import SETTING_NAMES, ReleaseSettings
from ghrelease.settings.errors import SettingsError

REQUIRED_SETTINGS: tuple[str, ...] = ("owner", "repo", "authorization", "tag_name")


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    owner: str
    repo: str
    authorization: str = field(repr=False)
    tag_name: str
    target_commitish: str | None
    release_name: str | None
    body: str | None
    draft: bool
    prerelease: bool
    overwrite: bool
    allow_upload_to_existing: bool
    assets: tuple[Path, ...] = ()

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


def build_release_request(settings: ReleaseSettings) -> Result[ReleaseRequest, SettingsError]:
    """Resolve every setting once and check the required ones.

    Unset flags count as False. Exceptions from deferred values propagate.
    """
    values = {name: settings.resolve(name) for name in SETTING_NAMES}

    missing = tuple(name for name in REQUIRED_SETTINGS if not values[name])
    if missing:
        return Err(
            SettingsError(
                kind="unset_required",
                message=f"required release settings are unset: {', '.join(missing)}",
                hint="set them in the release config or via the project conventions",
                missing=missing,
            )
        )

    return Ok(
        ReleaseRequest(
            owner=values["owner"],
            repo=values["repo"],
            authorization=values["authorization"],
            tag_name=values["tag_name"],
            target_commitish=values["target_commitish"],
            release_name=values["release_name"],
            body=values["body"],
            draft=bool(values["draft"]),
            prerelease=bool(values["prerelease"]),
            overwrite=bool(values["overwrite"]),
            allow_upload_to_existing=bool(values["allow_upload_to_existing"]),
            assets=settings.release_assets.files,
        )
    )
