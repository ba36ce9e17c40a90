"""Memoized, optionally traced views over settings."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from ghrelease.output.console import ConsoleProtocol, Style
from ghrelease.settings.source import Setting, Transformed

__all__ = [
    "CachedSetting",
    "DebugSetting",
    "ResolvedSetting",
    "resolve_setting",
]

MASK = "****"


class ResolvedSetting[T](Protocol):
    """Read-only view of a setting's final value."""

    @property
    def name(self) -> str: ...

    def get(self) -> T | None: ...


class CachedSetting[T]:
    """Evaluates a setting on first read and returns the stored value afterwards.

    Reassigning the underlying setting after the first read has no effect on
    this view. A read that raises is not cached.
    """

    __slots__ = ("_setting", "_value", "_resolved")

    def __init__(self, setting: Setting[T]) -> None:
        self._setting = setting
        self._value: T | None = None
        self._resolved = False

    @property
    def name(self) -> str:
        return self._setting.name

    @property
    def resolved(self) -> bool:
        return self._resolved

    def get(self) -> T | None:
        if not self._resolved:
            self._value = self._setting.get()
            self._resolved = True
        return self._value

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)

    def __repr__(self) -> str:
        state = repr(self._value) if self._resolved else "<unresolved>"
        return f"CachedSetting({self.name!r}, {state})"


class DebugSetting[T]:
    """Prints ``debug: <name> = <value>`` on every read of the wrapped view."""

    __slots__ = ("_console", "_delegate", "_mask")

    def __init__(
        self,
        console: ConsoleProtocol,
        delegate: ResolvedSetting[T],
        *,
        mask: bool = False,
    ) -> None:
        self._console = console
        self._delegate = delegate
        self._mask = mask

    @property
    def name(self) -> str:
        return self._delegate.name

    def get(self) -> T | None:
        value = self._delegate.get()
        self._console.print(f"debug: {self.name} = {self._display(value)}", Style.DIM)
        return value

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)

    def _display(self, value: T | None) -> str:
        if value is None:
            return "<unset>"
        if self._mask:
            return MASK
        return repr(value)


def resolve_setting[T](
    setting: Setting[T],
    *,
    console: ConsoleProtocol | None = None,
    mask: bool = False,
) -> ResolvedSetting[T]:
    """Build the resolved view for a setting.

    Args:
        setting: The setting to memoize.
        console: When given, reads are traced to it.
        mask: Hide the value in traces (credentials).
    """
    cached = CachedSetting(setting)
    if console is None:
        return cached
    return DebugSetting(console, cached, mask=mask)
