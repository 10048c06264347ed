"""
Declarative metadata attached to actions, declaring types, modules and
convention definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from apiconvention.domain.model.enums import NameMatchBehavior, TypeMatchBehavior

if TYPE_CHECKING:
    from apiconvention.domain.model.entities import ConventionDefinition

DEFAULT_STATUS: Final = "default"

type StatusCode = int | Literal["default"]


@dataclass(frozen=True, slots=True)
class Annotation:
    """Base class for every annotation.

    ``INHERITED`` controls whether the annotation is visible on entities that
    override (or derive from) the entity it is attached to.
    """

    INHERITED: ClassVar[bool] = True


@dataclass(frozen=True, slots=True, kw_only=True)
class Outcome(Annotation):
    """One declared response: a status code (or ``"default"``) and optional payload type."""

    status_code: StatusCode
    payload_type: type | None = None

    def __post_init__(self) -> None:
        if self.status_code == DEFAULT_STATUS:
            return
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise ValueError(f"Invalid status code: {self.status_code!r}")
        if not 100 <= self.status_code <= 599:
            raise ValueError(f"Status code out of range: {self.status_code}")

    @property
    def is_default(self) -> bool:
        return self.status_code == DEFAULT_STATUS


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiErrorType(Annotation):
    """Declares the payload type used for error responses."""

    error_type: type


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiConventionMethod(Annotation):
    """Pins an action to one convention definition, bypassing matching."""

    method: ConventionDefinition


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiConventionType(Annotation):
    """Declares a convention library for every action under a type or module."""

    convention_type: type


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiConventionNameMatch(Annotation):
    INHERITED: ClassVar[bool] = False

    behavior: NameMatchBehavior


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiConventionTypeMatch(Annotation):
    INHERITED: ClassVar[bool] = False

    behavior: TypeMatchBehavior
