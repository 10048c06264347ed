"""Result contracts shared by the response and error-type resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apiconvention.domain.model import ConventionDefinition, Outcome


class SelectionKind(StrEnum):
    """How the convention for an action was chosen."""

    DECLARED = "declared"
    MATCHED = "matched"
    NONE = "none"


@dataclass(frozen=True, slots=True, kw_only=True)
class ConventionSelection:
    """Winning convention definition, if any, and where it came from."""

    kind: SelectionKind
    convention: ConventionDefinition | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is SelectionKind.NONE) != (self.convention is None):
            raise ValueError("Convention must be present exactly when a selection was made")


class ErrorTypeScope(StrEnum):
    """Annotation scope that supplied the error type."""

    ACTION = "action"
    DECLARING_TYPE = "declaring_type"
    MODULE = "module"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorTypeHit:
    error_type: type
    scope: ErrorTypeScope


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionResult:
    """Inferred response metadata for one action.

    ``outcomes`` keeps annotation discovery order and is empty when no
    convention applies. ``error_type`` is always populated.
    """

    outcomes: tuple[Outcome, ...]
    error_type: type
    selection: SelectionKind = SelectionKind.NONE
    convention: ConventionDefinition | None = None
    error_type_scope: ErrorTypeScope = ErrorTypeScope.DEFAULT
