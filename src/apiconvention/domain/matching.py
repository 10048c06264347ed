"""Structural matching of actions against convention definitions.

Rules:
- the action name is compared with the convention name using the
  convention's ``ApiConventionNameMatch`` (default: exact)
- parameters are compared pairwise, by name and by type, using each
  convention parameter's match annotations (defaults: exact name,
  assignable type)
- a variadic convention parameter accepts every remaining action parameter
- otherwise both signatures must have the same number of parameters

Prefix and suffix matching respect word boundaries in both ``snake_case``
and ``camelCase`` names, so ``get`` matches ``get_widget`` and ``getWidget``
but not ``getaway``, and ``id`` matches ``widget_id`` and ``widgetId`` but
not ``paid``.
"""

from __future__ import annotations

import types
import typing
from typing import TYPE_CHECKING

from apiconvention.domain.model import (
    ApiConventionNameMatch,
    ApiConventionTypeMatch,
    NameMatchBehavior,
    ParameterKind,
    TypeMatchBehavior,
)

if TYPE_CHECKING:
    from apiconvention.domain.model import Action, Annotation, ConventionDefinition

_UNION_ORIGINS = (typing.Union, types.UnionType)


def match_convention(action: Action, candidate: ConventionDefinition) -> bool:
    """Return whether ``candidate``'s signature template describes ``action``."""

    if not is_name_match(action.name, candidate.name, _name_behavior(candidate.annotations)):
        return False

    parameters = action.parameters
    for index, convention_parameter in enumerate(candidate.parameters):
        if convention_parameter.kind is ParameterKind.VARIADIC:
            return True
        if index >= len(parameters):
            return False

        parameter = parameters[index]
        if not is_type_match(
            parameter.annotation,
            convention_parameter.annotation,
            _type_behavior(convention_parameter.annotations),
        ):
            return False
        if not is_name_match(
            parameter.name,
            convention_parameter.name,
            _name_behavior(convention_parameter.annotations),
        ):
            return False

    return len(parameters) == len(candidate.parameters)


def is_name_match(name: str, convention_name: str, behavior: NameMatchBehavior) -> bool:
    if behavior is NameMatchBehavior.ANY:
        return True
    if behavior is NameMatchBehavior.PREFIX:
        return _is_prefix_match(name, convention_name)
    if behavior is NameMatchBehavior.SUFFIX:
        return _is_suffix_match(name, convention_name)
    return name == convention_name


def is_type_match(
    annotation: object | None,
    convention_annotation: object | None,
    behavior: TypeMatchBehavior,
) -> bool:
    if behavior is TypeMatchBehavior.ANY:
        return True
    if convention_annotation is None or convention_annotation is object:
        return True
    if annotation is None:
        return False

    if typing.get_origin(annotation) in _UNION_ORIGINS:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return bool(members) and all(
            is_type_match(member, convention_annotation, behavior) for member in members
        )

    target = _runtime_class(convention_annotation)
    source = _runtime_class(annotation)
    if target is None or source is None:
        return annotation == convention_annotation
    return issubclass(source, target)


def _is_prefix_match(name: str, prefix: str) -> bool:
    if not name.startswith(prefix):
        return False
    rest = name[len(prefix) :]
    return not rest or rest[0] == "_" or rest[0].isupper()


def _is_suffix_match(name: str, suffix: str) -> bool:
    if not name.lower().endswith(suffix.lower()):
        return False
    if len(name) == len(suffix):
        return True
    boundary = name[-len(suffix) - 1]
    if boundary == "_":
        return True
    return boundary.islower() and name[-len(suffix)].isupper()


def _runtime_class(annotation: object) -> type | None:
    origin = typing.get_origin(annotation)
    if origin is not None:
        return origin if isinstance(origin, type) else None
    if isinstance(annotation, type):
        return annotation
    return None


def _name_behavior(annotations: tuple[Annotation, ...]) -> NameMatchBehavior:
    for annotation in annotations:
        if isinstance(annotation, ApiConventionNameMatch):
            return annotation.behavior
    return NameMatchBehavior.EXACT


def _type_behavior(annotations: tuple[Annotation, ...]) -> TypeMatchBehavior:
    for annotation in annotations:
        if isinstance(annotation, ApiConventionTypeMatch):
            return annotation.behavior
    return TypeMatchBehavior.ASSIGNABLE_FROM
