"""Tests for ghrelease.settings.resolver module."""

from __future__ import annotations

import pytest

from ghrelease.output.console import MockConsole, Style
from ghrelease.settings.resolver import CachedSetting, DebugSetting, resolve_setting
from ghrelease.settings.source import Setting


def _counting(value: str) -> tuple[Setting[str], list[int]]:
    calls: list[int] = []

    def compute() -> str:
        calls.append(1)
        return value

    setting = Setting("tag_name", str)
    setting.set(compute)
    return setting, calls


class TestCachedSetting:
    """Test memoization."""

    def test_computes_once(self) -> None:
        setting, calls = _counting("v1.0.0")
        cached = CachedSetting(setting)

        assert not cached.resolved
        for _ in range(5):
            assert cached.get() == "v1.0.0"
        assert len(calls) == 1
        assert cached.resolved

    def test_later_assignment_has_no_effect(self) -> None:
        setting = Setting("owner", str)
        setting.set("before")
        cached = CachedSetting(setting)
        assert cached.get() == "before"

        setting.set("after")
        assert cached.get() == "before"

    def test_absent_value_is_cached(self) -> None:
        setting = Setting("body", str)
        cached = CachedSetting(setting)
        assert cached.get() is None
        setting.set("late")
        assert cached.get() is None

    def test_failure_is_not_cached(self) -> None:
        attempts: list[int] = []

        def flaky() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first read fails")
            return "ok"

        setting = Setting("body", str)
        setting.set(flaky)
        cached = CachedSetting(setting)

        with pytest.raises(RuntimeError):
            cached.get()
        assert not cached.resolved
        assert cached.get() == "ok"

    def test_name_and_repr(self) -> None:
        setting = Setting("draft", bool)
        setting.set(True)
        cached = CachedSetting(setting)
        assert cached.name == "draft"
        assert repr(cached) == "CachedSetting('draft', <unresolved>)"
        cached.get()
        assert repr(cached) == "CachedSetting('draft', True)"

    def test_map_reads_cached_value(self) -> None:
        setting, calls = _counting("v2")
        cached = CachedSetting(setting)
        mapped = Setting("release_name", str)
        mapped.set(cached.map(lambda t: f"Release {t}"))

        assert mapped.get() == "Release v2"
        assert mapped.get() == "Release v2"
        assert len(calls) == 1


class TestDebugSetting:
    """Test the tracing wrapper."""

    def test_logs_each_read_without_changing_value(self) -> None:
        console = MockConsole()
        setting, calls = _counting("v1")
        view = DebugSetting(console, CachedSetting(setting))

        assert view.get() == "v1"
        assert view.get() == "v1"
        assert len(calls) == 1
        assert console.messages == ["debug: tag_name = 'v1'", "debug: tag_name = 'v1'"]
        assert console.count(Style.DIM) == 2

    def test_masked(self) -> None:
        console = MockConsole()
        setting = Setting("authorization", str)
        setting.set("Token abc")
        view = DebugSetting(console, CachedSetting(setting), mask=True)

        assert view.get() == "Token abc"
        assert console.messages == ["debug: authorization = ****"]
        assert "abc" not in console.text

    def test_unset(self) -> None:
        console = MockConsole()
        view = DebugSetting(console, CachedSetting(Setting("body", str)))
        assert view.get() is None
        assert console.messages == ["debug: body = <unset>"]


class TestResolveSetting:
    def test_without_console_returns_cached(self) -> None:
        view = resolve_setting(Setting("owner", str))
        assert isinstance(view, CachedSetting)

    def test_with_console_returns_debug(self) -> None:
        view = resolve_setting(Setting("owner", str), console=MockConsole())
        assert isinstance(view, DebugSetting)
        assert view.name == "owner"
