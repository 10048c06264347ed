"""Default annotation reader over the in-memory domain model.

Inheritance follows the override chain of each entity kind:
- actions walk ``Action.overrides``
- declaring types walk ``DeclaringType.base``
- modules and convention definitions have no ancestors
"""

from __future__ import annotations

from functools import singledispatch
from typing import TYPE_CHECKING

from apiconvention.domain.model import Action, DeclaringType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apiconvention.domain.model import Annotation
    from apiconvention.domain.ports import AnnotatedEntity


def read_annotations(entity: AnnotatedEntity, *, inherit: bool) -> tuple[Annotation, ...]:
    """Return ``entity``'s own annotations, then inheritable ones of its ancestors."""

    collected = list(entity.annotations)
    if inherit:
        for ancestor in _ancestors(entity):
            collected.extend(annotation for annotation in ancestor.annotations if annotation.INHERITED)
    return tuple(collected)


def _ancestors(entity: AnnotatedEntity) -> Iterator[AnnotatedEntity]:
    parent = _parent_of(entity)
    while parent is not None:
        yield parent
        parent = _parent_of(parent)


@singledispatch
def _parent_of(_entity: object) -> AnnotatedEntity | None:
    return None


@_parent_of.register(Action)
def _(action: Action) -> AnnotatedEntity | None:
    return action.overrides


@_parent_of.register(DeclaringType)
def _(declaring_type: DeclaringType) -> AnnotatedEntity | None:
    return declaring_type.base
