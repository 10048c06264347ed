"""Adapter reading annotations and signatures from live Python objects."""

from __future__ import annotations

from .decorators import (
    annotate,
    api_controller,
    api_convention_method,
    api_convention_name_match,
    api_convention_type,
    api_error_type,
    attached_annotations,
    module_annotations,
    non_action,
    produces_default_response_type,
    produces_response_type,
)
from .errors import ConventionLookupError
from .introspection import (
    build_actions,
    build_convention_definition,
    build_convention_source,
    build_declaring_type,
    build_module,
    convention_sources_for,
    find_controllers,
    qualified_name,
)

__all__ = [
    "ConventionLookupError",
    "annotate",
    "api_controller",
    "api_convention_method",
    "api_convention_name_match",
    "api_convention_type",
    "api_error_type",
    "attached_annotations",
    "build_actions",
    "build_convention_definition",
    "build_convention_source",
    "build_declaring_type",
    "build_module",
    "convention_sources_for",
    "find_controllers",
    "module_annotations",
    "non_action",
    "produces_default_response_type",
    "produces_response_type",
    "qualified_name",
]
