"""Ports for reading annotations attached to entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from apiconvention.domain.model import (
        Action,
        Annotation,
        ConventionDefinition,
        DeclaringType,
        Module,
    )

type AnnotatedEntity = Action | DeclaringType | Module | ConventionDefinition


@runtime_checkable
class AnnotationReader(Protocol):
    """Return the annotations visible on ``entity``.

    With ``inherit=True`` the reader also includes inheritable annotations of
    the entities ``entity`` overrides or derives from, nearest first.
    """

    def __call__(self, entity: AnnotatedEntity, *, inherit: bool) -> tuple[Annotation, ...]: ...


__all__ = ["AnnotatedEntity", "AnnotationReader"]
