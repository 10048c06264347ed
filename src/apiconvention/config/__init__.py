"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .inference import (
    DEFAULT_CONVENTIONS_VAR,
    DEFAULT_ERROR_TYPE_VAR,
    InferenceConfig,
    get_inference_config,
    import_type,
)
from .logging import configure_logging

__all__ = [
    "DEFAULT_CONVENTIONS_VAR",
    "DEFAULT_ERROR_TYPE_VAR",
    "ConfigurationError",
    "InferenceConfig",
    "InvalidConfigurationError",
    "configure_logging",
    "env_flag",
    "get_inference_config",
    "import_type",
    "optional_env_var",
]
