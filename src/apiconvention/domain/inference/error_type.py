"""Default error type inference.

The error type is taken from the nearest ``ApiErrorType`` annotation:
action (inherited), then declaring type (inherited), then module. When no
scope declares one, the configured default (``ProblemDetails``) applies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from apiconvention.domain.model import ApiErrorType, ProblemDetails

from .annotations import read_annotations as default_read_annotations
from .contracts import ErrorTypeHit, ErrorTypeScope

if TYPE_CHECKING:
    from apiconvention.domain.model import Action, Annotation
    from apiconvention.domain.ports import AnnotationReader


type ErrorTypeProvider = Callable[[Action, AnnotationReader], ErrorTypeHit | None]


def _first_error_type(
    annotations: tuple[Annotation, ...],
    scope: ErrorTypeScope,
) -> ErrorTypeHit | None:
    for annotation in annotations:
        if isinstance(annotation, ApiErrorType):
            return ErrorTypeHit(error_type=annotation.error_type, scope=scope)
    return None


def _from_action(action: Action, read: AnnotationReader) -> ErrorTypeHit | None:
    return _first_error_type(read(action, inherit=True), ErrorTypeScope.ACTION)


def _from_declaring_type(action: Action, read: AnnotationReader) -> ErrorTypeHit | None:
    return _first_error_type(
        read(action.declaring_type, inherit=True),
        ErrorTypeScope.DECLARING_TYPE,
    )


def _from_module(action: Action, read: AnnotationReader) -> ErrorTypeHit | None:
    return _first_error_type(
        read(action.declaring_type.module, inherit=False),
        ErrorTypeScope.MODULE,
    )


ERROR_TYPE_PROVIDERS: tuple[ErrorTypeProvider, ...] = (
    _from_action,
    _from_declaring_type,
    _from_module,
)


def select_error_type(
    action: Action,
    *,
    read_annotations: AnnotationReader | None = None,
    default_error_type: type = ProblemDetails,
) -> ErrorTypeHit:
    """Return the error type for ``action`` and the scope that declared it."""

    reader = read_annotations or default_read_annotations
    for provider in ERROR_TYPE_PROVIDERS:
        hit = provider(action, reader)
        if hit is not None:
            return hit
    return ErrorTypeHit(error_type=default_error_type, scope=ErrorTypeScope.DEFAULT)


def resolve_error_type(
    action: Action,
    *,
    read_annotations: AnnotationReader | None = None,
    default_error_type: type = ProblemDetails,
) -> type:
    return select_error_type(
        action,
        read_annotations=read_annotations,
        default_error_type=default_error_type,
    ).error_type
