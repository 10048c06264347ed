"""Convention-based inference of response metadata for API actions.

Two independent resolvers feed one result:
1) response outcomes from a pinned or structurally matched convention
2) the default error type from the action/type/module annotation chain
"""

from __future__ import annotations

from .annotations import read_annotations
from .contracts import (
    ConventionSelection,
    ErrorTypeHit,
    ErrorTypeScope,
    ResolutionResult,
    SelectionKind,
)
from .engine import ConventionInference, resolve_all
from .error_type import resolve_error_type, select_error_type
from .responses import find_declared_convention, resolve_response_outcomes, select_convention

__all__ = [
    "ConventionInference",
    "ConventionSelection",
    "ErrorTypeHit",
    "ErrorTypeScope",
    "ResolutionResult",
    "SelectionKind",
    "find_declared_convention",
    "read_annotations",
    "resolve_all",
    "resolve_error_type",
    "resolve_response_outcomes",
    "select_convention",
    "select_error_type",
]
