"""Result type for failures the caller is expected to handle.

Config loading and release request assembly report their failures as values
instead of raising, so callers (the CLI, the release task) decide what is
fatal.

Usage:
    match load_release_config(path):
        case Ok(config):
            config.apply_to(settings)
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error payload.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
