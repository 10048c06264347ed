"""Public domain model surface."""

from __future__ import annotations

from apiconvention.domain.model.annotations import (
    DEFAULT_STATUS,
    Annotation,
    ApiConventionMethod,
    ApiConventionNameMatch,
    ApiConventionType,
    ApiConventionTypeMatch,
    ApiErrorType,
    Outcome,
    StatusCode,
)
from apiconvention.domain.model.entities import (
    Action,
    ConventionDefinition,
    ConventionSource,
    DeclaringType,
    Module,
    Parameter,
)
from apiconvention.domain.model.enums import NameMatchBehavior, ParameterKind, TypeMatchBehavior
from apiconvention.domain.model.problem_details import ProblemDetails

__all__ = [  # noqa: RUF022
    # annotations
    "DEFAULT_STATUS",
    "Annotation",
    "ApiConventionMethod",
    "ApiConventionNameMatch",
    "ApiConventionType",
    "ApiConventionTypeMatch",
    "ApiErrorType",
    "Outcome",
    "StatusCode",
    # entities
    "Action",
    "ConventionDefinition",
    "ConventionSource",
    "DeclaringType",
    "Module",
    "Parameter",
    # enums
    "NameMatchBehavior",
    "ParameterKind",
    "TypeMatchBehavior",
    # payloads
    "ProblemDetails",
]
