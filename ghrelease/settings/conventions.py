"""Fallback values derived from the project being released.

Conventions only apply while a setting is unset, and are computed lazily so
that project metadata assigned later in the configuration phase is seen.
"""

from __future__ import annotations

from dataclasses import dataclass

from ghrelease.settings.container import FLAG_SETTINGS, ReleaseSettings
from ghrelease.settings.source import Deferred

DEFAULT_TARGET_COMMITISH = "master"


@dataclass(slots=True)
class ProjectInfo:
    """Metadata of the project being released.

    Mutable so build scripts can fill it in after conventions are applied.
    """

    name: str | None = None
    group: str | None = None
    version: str | None = None
    root_name: str | None = None


def owner_from_group(group: str | None) -> str | None:
    """``com.github.breadmoirai`` -> ``breadmoirai``."""
    if not group:
        return None
    owner = group.rsplit(".", 1)[-1].strip()
    return owner or None


def version_tag(version: str | None) -> str | None:
    if not version:
        return None
    return f"v{version}"


def apply_conventions(settings: ReleaseSettings, project: ProjectInfo) -> None:
    """Give each setting its project-derived fallback.

    ``authorization`` and ``body`` get none.
    """
    settings.owner.convention(Deferred(lambda: owner_from_group(project.group)))
    settings.repo.convention(Deferred(lambda: project.name or project.root_name or None))
    settings.tag_name.convention(Deferred(lambda: version_tag(project.version)))
    settings.target_commitish.convention(DEFAULT_TARGET_COMMITISH)
    settings.release_name.convention(Deferred(lambda: version_tag(project.version)))
    for name in FLAG_SETTINGS:
        settings.setting(name).convention(False)
