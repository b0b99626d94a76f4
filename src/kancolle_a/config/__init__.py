"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_path, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .kancolle_arcade import (
    KANCOLLE_ARCADE_API_BASE_URL,
    KancolleArcadeConfig,
    get_kancolle_arcade_config,
)
from .logging import configure_logging
from .sources import SourceFilesConfig, get_source_files_config

__all__ = [
    "KANCOLLE_ARCADE_API_BASE_URL",
    "ConfigurationError",
    "KancolleArcadeConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SourceFilesConfig",
    "configure_logging",
    "get_kancolle_arcade_config",
    "get_source_files_config",
    "optional_env_path",
    "optional_env_var",
    "require_env_vars",
]
