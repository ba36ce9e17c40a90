from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

__all__ = ["AssetList", "AssetRef"]

AssetRef = str | os.PathLike[str]


class AssetList:
    """Files to attach to the release.

    Assignment replaces the whole list. Entries are kept as paths; nothing is
    read from disk here. Nested iterables are flattened and duplicates dropped.
    """

    __slots__ = ("_files",)

    def __init__(self, *assets: AssetRef | Iterable[AssetRef]) -> None:
        self._files: tuple[Path, ...] = ()
        if assets:
            self.set_from(*assets)

    def set_from(self, *assets: AssetRef | Iterable[AssetRef]) -> None:
        seen: dict[Path, None] = {}
        for path in _flatten(assets):
            seen.setdefault(path, None)
        self._files = tuple(seen)

    @property
    def files(self) -> tuple[Path, ...]:
        return self._files

    def __iter__(self) -> Iterator[Path]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (str, os.PathLike)):
            return Path(item) in self._files
        return False

    def __repr__(self) -> str:
        return f"AssetList({[str(p) for p in self._files]!r})"


def _flatten(items: Iterable[object]) -> Iterator[Path]:
    for item in items:
        if isinstance(item, (str, os.PathLike)):
            yield Path(item)
        elif isinstance(item, Iterable):
            yield from _flatten(item)
        else:
            raise TypeError(f"release asset must be a path, got {type(item).__name__}")
