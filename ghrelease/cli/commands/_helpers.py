"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from ghrelease.core.errors import ErrorCode
from ghrelease.core.result import Err, Ok, Result
from ghrelease.output.console import Style

if TYPE_CHECKING:
    from ghrelease.cli.context import CLIContext


def unwrap_or_exit[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.USER_ERROR,
) -> T:
    """Return the Ok value, or print the error and exit with error_code.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Ok):
        return result.value
    assert isinstance(result, Err)
    error = result.error
    message: str = getattr(error, "message", str(error))
    hint: str | None = getattr(error, "hint", None)
    ctx.console.error(message)
    if hint:
        ctx.console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(error_code))
