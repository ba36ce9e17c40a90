"""Release settings: lazy slots, memoized views and project conventions."""

from .assets import AssetList
from .container import SETTING_NAMES, ReleaseSettings
from .conventions import ProjectInfo, apply_conventions
from .errors import SettingsError
from .request import ReleaseRequest, build_release_request
from .resolver import CachedSetting, DebugSetting, ResolvedSetting
from .source import Deferred, Fixed, Setting, SettingCycleError, Transformed

__all__ = [
    "AssetList",
    "CachedSetting",
    "DebugSetting",
    "Deferred",
    "Fixed",
    "ProjectInfo",
    "ReleaseRequest",
    "ReleaseSettings",
    "ResolvedSetting",
    "SETTING_NAMES",
    "Setting",
    "SettingCycleError",
    "SettingsError",
    "Transformed",
    "apply_conventions",
    "build_release_request",
]
