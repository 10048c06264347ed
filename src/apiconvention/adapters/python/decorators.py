"""Decorators attaching annotations to live Python objects.

Annotations are stored on the decorated object itself (functions, classes)
or on the module object for module-wide scope. Stacked decorators keep their
written (top to bottom) order.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Final

from apiconvention.domain.model import (
    DEFAULT_STATUS,
    ApiConventionMethod,
    ApiConventionNameMatch,
    ApiConventionType,
    ApiErrorType,
    NameMatchBehavior,
    Outcome,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from apiconvention.domain.model import Annotation, StatusCode

ANNOTATIONS_ATTR: Final = "__api_annotations__"
CONTROLLER_ATTR: Final = "__api_controller__"
NON_ACTION_ATTR: Final = "__api_non_action__"


def _unwrap(obj: object) -> object:
    if isinstance(obj, staticmethod | classmethod):
        return obj.__func__
    return obj


def attached_annotations(obj: object) -> tuple[Annotation, ...]:
    """Return annotations attached directly to ``obj`` (never those of a base class)."""

    try:
        namespace = vars(_unwrap(obj))
    except TypeError:
        return ()
    return tuple(namespace.get(ANNOTATIONS_ATTR, ()))


def annotate[T](obj: T, *annotations: Annotation) -> T:
    target = _unwrap(obj)
    setattr(target, ANNOTATIONS_ATTR, (*annotations, *attached_annotations(target)))
    return obj


def _annotation_decorator[T](*annotations: Annotation) -> Callable[[T], T]:
    def decorator(obj: T) -> T:
        return annotate(obj, *annotations)

    return decorator


def produces_response_type[T](
    status_code: StatusCode,
    payload_type: type | None = None,
) -> Callable[[T], T]:
    return _annotation_decorator(Outcome(status_code=status_code, payload_type=payload_type))


def produces_default_response_type[T](payload_type: type | None = None) -> Callable[[T], T]:
    return _annotation_decorator(Outcome(status_code=DEFAULT_STATUS, payload_type=payload_type))


def api_error_type[T](error_type: type) -> Callable[[T], T]:
    return _annotation_decorator(ApiErrorType(error_type=error_type))


def api_convention_type[T](convention_type: type) -> Callable[[T], T]:
    return _annotation_decorator(ApiConventionType(convention_type=convention_type))


def api_convention_name_match[T](behavior: NameMatchBehavior) -> Callable[[T], T]:
    return _annotation_decorator(ApiConventionNameMatch(behavior=behavior))


def api_convention_method[T](convention_type: type, method_name: str) -> Callable[[T], T]:
    """Pin an action to ``convention_type.method_name``.

    The method is resolved eagerly, so a typo fails at import time with
    ``ConventionLookupError`` instead of silently disabling the convention.
    """

    from .introspection import build_convention_definition  # noqa: PLC0415

    method = build_convention_definition(convention_type, method_name)
    return _annotation_decorator(ApiConventionMethod(method=method))


def api_controller[T: type](cls: T) -> T:
    setattr(cls, CONTROLLER_ATTR, True)
    return cls


def non_action[T](function: T) -> T:
    setattr(_unwrap(function), NON_ACTION_ATTR, True)
    return function


def module_annotations(module_name: str, *annotations: Annotation) -> None:
    """Attach module-wide annotations; call as ``module_annotations(__name__, ...)``."""

    module = sys.modules[module_name]
    setattr(module, ANNOTATIONS_ATTR, (*attached_annotations(module), *annotations))
