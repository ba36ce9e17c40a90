"""Core types: results, exit codes and config loading."""

from .config import ConfigError, ReleaseConfig, load_release_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ReleaseConfig",
    "load_release_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
