"""Inference configuration values."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Final

from apiconvention.domain.model import ProblemDetails

from .env import env_flag, optional_env_var
from .errors import InvalidConfigurationError

DEFAULT_ERROR_TYPE_VAR: Final = "APICONVENTION_DEFAULT_ERROR_TYPE"
DEFAULT_CONVENTIONS_VAR: Final = "APICONVENTION_DEFAULT_CONVENTIONS"


@dataclass(frozen=True, slots=True)
class InferenceConfig:
    """Process-wide inference settings."""

    default_error_type: type = ProblemDetails
    include_default_conventions: bool = True


def get_inference_config(
    *,
    default_error_type: str | None = None,
    include_default_conventions: bool | None = None,
) -> InferenceConfig:
    """Build the config from explicit overrides, falling back to the environment."""

    error_type_path = default_error_type or optional_env_var(DEFAULT_ERROR_TYPE_VAR)
    include_defaults = (
        include_default_conventions
        if include_default_conventions is not None
        else env_flag(DEFAULT_CONVENTIONS_VAR, default=True)
    )
    return InferenceConfig(
        default_error_type=import_type(error_type_path) if error_type_path else ProblemDetails,
        include_default_conventions=include_defaults,
    )


def import_type(path: str) -> type:
    """Import ``package.module.Name`` (or ``package.module:Name``) and return the class."""

    module_name, sep, attribute = path.replace(":", ".").rpartition(".")
    if not sep or not module_name or not attribute:
        raise InvalidConfigurationError(f"Expected a dotted path to a type, got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise InvalidConfigurationError(f"Cannot import module {module_name!r}") from exc

    candidate = getattr(module, attribute, None)
    if not isinstance(candidate, type):
        raise InvalidConfigurationError(f"{path!r} does not name a type")
    return candidate
