"""Tests for ghrelease.core.result module."""

import pytest

from ghrelease.core.result import Err, Ok, Result


def _describe(result: Result[str, str]) -> str:
    match result:
        case Ok(value):
            return f"ok: {value}"
        case Err(error):
            return f"err: {error}"


class TestOk:
    """Tests for Ok type."""

    def test_value(self) -> None:
        assert Ok("v1.0.0").value == "v1.0.0"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Ok("x") == Ok("x")
        assert Ok("x") != Err("x")

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"


class TestErr:
    """Tests for Err type."""

    def test_error(self) -> None:
        assert Err("missing owner").error == "missing owner"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestMatching:
    def test_ok_branch(self) -> None:
        assert _describe(Ok("v1")) == "ok: v1"

    def test_err_branch(self) -> None:
        assert _describe(Err("no tag")) == "err: no tag"
