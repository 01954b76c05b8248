"""Core domain types and logic."""

from .errors import ErrorCode
from .registry import (
    DEFAULT_ENVIRONMENTS,
    ConfigError,
    Environment,
    EnvironmentRegistry,
    load_registry,
    save_registry,
)
from .result import Err, Ok, Result, is_err, is_ok
from .settings import Settings

__all__ = [
    # errors
    "ErrorCode",
    # registry
    "DEFAULT_ENVIRONMENTS",
    "ConfigError",
    "Environment",
    "EnvironmentRegistry",
    "load_registry",
    "save_registry",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # settings
    "Settings",
]
