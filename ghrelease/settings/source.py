"""Setting slots and the value sources they can hold.

A setting holds one of three sources, or nothing:

- ``Fixed``: a literal value.
- ``Deferred``: a zero-argument callable evaluated on demand.
- ``Transformed``: a function applied to another source's value.

Any object with a ``get()`` method (including another ``Setting``) can also be
used as a source; it is read through on every evaluation. Memoization is not
done here, see ``ghrelease.settings.resolver``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Deferred",
    "Fixed",
    "Provider",
    "Setting",
    "SettingCycleError",
    "Source",
    "Transformed",
    "evaluate",
]


class SettingCycleError(RuntimeError):
    """A setting's value was requested while that value was being computed."""


@runtime_checkable
class Provider[T](Protocol):
    """Anything that can produce a value (or None when absent) on demand."""

    def get(self) -> T | None: ...


@dataclass(frozen=True, slots=True)
class Fixed[T]:
    value: T

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)


@dataclass(frozen=True, slots=True)
class Deferred[T]:
    """A computation run each time the source is evaluated.

    Wrap it in a resolved view to run it at most once.
    """

    compute: Callable[[], T | None]

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)


@dataclass(frozen=True, slots=True)
class Transformed[T]:
    """The result of applying ``transform`` to ``upstream``'s value.

    An absent upstream yields an absent result; ``transform`` is not called.
    """

    upstream: Source[object]
    transform: Callable[[object], T]

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)


type Source[T] = Fixed[T] | Deferred[T] | Transformed[T] | Provider[T]


def evaluate[T](source: Source[T]) -> T | None:
    """Evaluate a source chain once, without caching.

    Exceptions raised by deferred computations or transforms propagate
    unchanged.
    """
    match source:
        case Fixed(value=value):
            return value
        case Deferred(compute=compute):
            return compute()
        case Transformed(upstream=upstream, transform=transform):
            value = evaluate(upstream)
            if value is None:
                return None
            return transform(value)
        case _:
            return source.get()


def _is_source(value: object) -> bool:
    if isinstance(value, (Fixed, Deferred, Transformed)):
        return True
    return isinstance(value, Provider) and not isinstance(value, Mapping)


class Setting[T]:
    """A named, typed slot for one configuration value.

    Assignment accepts a literal of the setting's kind, a source (including
    another setting), or a zero-argument callable. ``None`` clears the slot.
    The last assignment wins.

    A convention is a fallback source used only while nothing is assigned.

    ``bind`` rewrites every assigned source; the container uses it to route
    references to its own settings through their memoized views.
    """

    __slots__ = ("name", "kind", "_source", "_convention", "_bind", "_evaluating")

    def __init__(
        self,
        name: str,
        kind: type[T],
        *,
        bind: Callable[[Source[Any]], Source[Any]] | None = None,
    ) -> None:
        self.name = name
        self.kind = kind
        self._source: Source[T] | None = None
        self._convention: Source[T] | None = None
        self._bind = bind
        self._evaluating = False

    def set(self, value: T | Source[T] | Callable[[], T | None] | None) -> None:
        self._source = self._coerce(value)

    def convention(self, value: T | Source[T] | Callable[[], T | None] | None) -> None:
        self._convention = self._coerce(value)

    @property
    def is_present(self) -> bool:
        """True if a value or convention is assigned. Does not evaluate it."""
        return self._source is not None or self._convention is not None

    def get(self) -> T | None:
        """Evaluate the current source. Not memoized."""
        source = self._source if self._source is not None else self._convention
        if source is None:
            return None
        if self._evaluating:
            raise SettingCycleError(f"{self.name}: setting depends on its own value")
        self._evaluating = True
        try:
            return self._check(evaluate(source))
        finally:
            self._evaluating = False

    def map[U](self, transform: Callable[[T], U]) -> Transformed[U]:
        return Transformed(self, transform)

    def _coerce(self, value: object) -> Source[T] | None:
        if value is None:
            return None
        if isinstance(value, self.kind):
            return Fixed(value)
        if _is_source(value):
            source: Source[Any] = value  # type: ignore[assignment]
            return self._bind(source) if self._bind is not None else source
        if callable(value):
            return Deferred(value)
        raise TypeError(
            f"{self.name}: expected {self.kind.__name__}, a provider or a callable, "
            f"got {type(value).__name__}"
        )

    def _check(self, value: object) -> T | None:
        if value is None or isinstance(value, self.kind):
            return value  # type: ignore[return-value]
        raise TypeError(
            f"{self.name}: expected {self.kind.__name__} value, got {type(value).__name__}"
        )

    def __repr__(self) -> str:
        return f"Setting({self.name!r}, {self.kind.__name__})"
