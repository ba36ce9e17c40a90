"""The release settings container.

Usage:
    settings = ReleaseSettings()
    settings.owner = "breadmoirai"
    settings.repo = lambda: project_name()
    settings.set_token(lambda: os.environ.get("GITHUB_TOKEN"))
    settings.release_name = settings.tag_name.map(lambda tag: f"Release {tag}")
    settings.release_assets = ["build/libs/app.jar"]

    # later, in the release task
    settings.resolve("tag_name")
    settings.owner_provider.get()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

from ghrelease.output.console import ConsoleProtocol, RichConsole
from ghrelease.settings.assets import AssetList, AssetRef
from ghrelease.settings.resolver import ResolvedSetting, resolve_setting
from ghrelease.settings.source import Setting, Source, Transformed

__all__ = [
    "FLAG_SETTINGS",
    "SECRET_SETTINGS",
    "SETTING_NAMES",
    "TEXT_SETTINGS",
    "ReleaseSettings",
    "token_header",
]

TEXT_SETTINGS: tuple[str, ...] = (
    "owner",
    "repo",
    "authorization",
    "tag_name",
    "target_commitish",
    "release_name",
    "body",
)
FLAG_SETTINGS: tuple[str, ...] = (
    "draft",
    "prerelease",
    "overwrite",
    "allow_upload_to_existing",
)
SETTING_NAMES: tuple[str, ...] = TEXT_SETTINGS + FLAG_SETTINGS

SECRET_SETTINGS: frozenset[str] = frozenset({"authorization"})

type SettingValue = str | bool | Source[Any] | Callable[[], Any] | None


def token_header(token: object) -> str:
    return f"Token {token}"


class _SettingSlot:
    """``settings.owner`` returns the Setting; ``settings.owner = x`` assigns it."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> _SettingSlot: ...

    @overload
    def __get__(self, instance: ReleaseSettings, owner: type | None = None) -> Setting[Any]: ...

    def __get__(
        self, instance: ReleaseSettings | None, owner: type | None = None
    ) -> _SettingSlot | Setting[Any]:
        if instance is None:
            return self
        return instance.setting(self._name)

    def __set__(self, instance: ReleaseSettings, value: SettingValue) -> None:
        instance.set(self._name, value)


class _ResolvedSlot:
    """``settings.owner_provider`` returns the memoized view of ``owner``."""

    def __init__(self, setting_name: str) -> None:
        self._setting_name = setting_name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> _ResolvedSlot: ...

    @overload
    def __get__(
        self, instance: ReleaseSettings, owner: type | None = None
    ) -> ResolvedSetting[Any]: ...

    def __get__(
        self, instance: ReleaseSettings | None, owner: type | None = None
    ) -> _ResolvedSlot | ResolvedSetting[Any]:
        if instance is None:
            return self
        return instance.resolved(self._setting_name)


class ReleaseSettings:
    """Holds the release settings and hands out their memoized views.

    Settings can be reassigned freely until they are resolved. Each setting's
    resolved view is created once; with ``verbose=True`` it is also traced to
    the console on every read.
    """

    owner = _SettingSlot()
    repo = _SettingSlot()
    authorization = _SettingSlot()
    tag_name = _SettingSlot()
    target_commitish = _SettingSlot()
    release_name = _SettingSlot()
    body = _SettingSlot()
    draft = _SettingSlot()
    prerelease = _SettingSlot()
    overwrite = _SettingSlot()
    allow_upload_to_existing = _SettingSlot()

    owner_provider = _ResolvedSlot("owner")
    repo_provider = _ResolvedSlot("repo")
    authorization_provider = _ResolvedSlot("authorization")
    tag_name_provider = _ResolvedSlot("tag_name")
    target_commitish_provider = _ResolvedSlot("target_commitish")
    release_name_provider = _ResolvedSlot("release_name")
    body_provider = _ResolvedSlot("body")
    draft_provider = _ResolvedSlot("draft")
    prerelease_provider = _ResolvedSlot("prerelease")
    overwrite_provider = _ResolvedSlot("overwrite")
    allow_upload_to_existing_provider = _ResolvedSlot("allow_upload_to_existing")

    def __init__(
        self,
        *,
        verbose: bool = False,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self._settings: dict[str, Setting[Any]] = {}
        for name in TEXT_SETTINGS:
            self._settings[name] = Setting(name, str, bind=self._bind)
        for name in FLAG_SETTINGS:
            self._settings[name] = Setting(name, bool, bind=self._bind)
        self._assets = AssetList()
        self._resolved: dict[str, ResolvedSetting[Any]] = {}
        self._trace: ConsoleProtocol | None = None
        if verbose:
            self._trace = console if console is not None else RichConsole()

    @property
    def verbose(self) -> bool:
        return self._trace is not None

    def setting(self, name: str) -> Setting[Any]:
        try:
            return self._settings[name]
        except KeyError:
            raise KeyError(f"unknown setting: {name}") from None

    def items(self) -> Iterator[tuple[str, Setting[Any]]]:
        """Yield (name, setting) pairs in declaration order."""
        return iter(self._settings.items())

    def set(self, name: str, value: SettingValue) -> None:
        self.setting(name).set(value)

    def set_token(self, token: str | Source[Any] | Callable[[], Any] | None) -> None:
        """Store ``"Token <token>"`` as the authorization.

        The header is built lazily for every form of ``token``; a callable is
        not invoked until authorization is resolved. ``None`` clears it.
        """
        if token is None:
            self.authorization.set(None)
            return
        upstream = Setting("token", str, bind=self._bind)
        upstream.set(token)
        self.authorization.set(Transformed(upstream, token_header))

    @property
    def release_assets(self) -> AssetList:
        return self._assets

    @release_assets.setter
    def release_assets(self, assets: AssetRef | Iterable[AssetRef]) -> None:
        self._assets.set_from(assets)

    def resolved(self, name: str) -> ResolvedSetting[Any]:
        """Return the memoized view of a setting, creating it on first use."""
        view = self._resolved.get(name)
        if view is None:
            view = resolve_setting(
                self.setting(name),
                console=self._trace,
                mask=name in SECRET_SETTINGS,
            )
            self._resolved[name] = view
        return view

    def resolve(self, name: str) -> Any:
        """Final value of a setting, computed on the first call only.

        Returns None when the setting is unset.
        """
        return self.resolved(name).get()

    def _bind(self, source: Source[Any]) -> Source[Any]:
        """Read this container's settings through their memoized views.

        A setting referenced by another one is then computed once, and later
        reassignments do not leak into values derived from it.
        """
        match source:
            case Setting() if self._settings.get(source.name) is source:
                return self.resolved(source.name)
            case Transformed(upstream=upstream, transform=transform):
                return Transformed(self._bind(upstream), transform)
            case _:
                return source

    def __repr__(self) -> str:
        present = [name for name, s in self._settings.items() if s.is_present]
        return f"ReleaseSettings(present={present!r}, assets={len(self._assets)})"
