from __future__ import annotations

from pathlib import Path

import typer

from ghrelease.cli.commands._helpers import unwrap_or_exit
from ghrelease.cli.context import build_context
from ghrelease.core.config import load_release_config
from ghrelease.core.errors import ErrorCode
from ghrelease.output.console import Style
from ghrelease.settings.container import SECRET_SETTINGS, SETTING_NAMES, ReleaseSettings
from ghrelease.settings.conventions import ProjectInfo, apply_conventions
from ghrelease.settings.request import build_release_request
from ghrelease.settings.resolver import MASK


def show(
    config: Path = typer.Option(
        Path("release.toml"), "--config", "-c", help="Release settings file (TOML)."
    ),
    group: str | None = typer.Option(None, "--group", help="Project group; owner convention."),
    name: str | None = typer.Option(None, "--name", help="Project name; repo convention."),
    project_version: str | None = typer.Option(
        None, "--project-version", help="Project version; tag and release name convention."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace every setting read."),
    check: bool = typer.Option(False, "--check", help="Fail if required settings are unset."),
) -> None:
    """Resolve the release settings and print them."""
    ctx = build_context()

    release_config = unwrap_or_exit(load_release_config(config), ctx, ErrorCode.ENV_ERROR)

    settings = ReleaseSettings(verbose=verbose, console=ctx.console)
    if group or name or project_version:
        apply_conventions(
            settings, ProjectInfo(name=name, group=group, version=project_version)
        )
    release_config.apply_to(settings)

    ctx.console.header("Release settings")
    for setting_name in SETTING_NAMES:
        value = settings.resolve(setting_name)
        ctx.console.print(f"{setting_name}: {_display(setting_name, value)}")

    ctx.console.header("Assets")
    if not settings.release_assets:
        ctx.console.print("(none)", Style.DIM)
    for path in settings.release_assets:
        ctx.console.print(str(path))

    if check:
        request = unwrap_or_exit(build_release_request(settings), ctx, ErrorCode.USER_ERROR)
        ctx.console.success(f"ready to release {request.slug} at {request.tag_name}")


def _display(setting_name: str, value: object) -> str:
    if value is None:
        return "<unset>"
    if setting_name in SECRET_SETTINGS:
        return MASK
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
