from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class SettingsError:
    kind: Literal["unset_required"]
    message: str
    hint: str | None = None
    missing: tuple[str, ...] = ()

