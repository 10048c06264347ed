"""Serializable description reports built from resolution results."""

from __future__ import annotations

import typing
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from apiconvention.domain.inference import ErrorTypeScope, SelectionKind

if TYPE_CHECKING:
    from apiconvention.domain.inference import ResolutionResult
    from apiconvention.domain.model import Action, Outcome


def type_reference(annotation: object | None) -> str | None:
    """Render a type as a dotted path (``builtins`` omitted)."""

    if annotation is None:
        return None
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation)


class ReportModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class OutcomeReport(ReportModel):
    status_code: int | Literal["default"]
    payload_type: str | None = None

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> OutcomeReport:
        return cls(
            status_code=outcome.status_code,
            payload_type=type_reference(outcome.payload_type),
        )


class ActionReport(ReportModel):
    action: str
    selection: SelectionKind
    convention: str | None = None
    outcomes: list[OutcomeReport] = Field(default_factory=list)
    error_type: str
    error_type_scope: ErrorTypeScope

    @classmethod
    def from_result(cls, action: Action, result: ResolutionResult) -> ActionReport:
        convention = result.convention
        return cls(
            action=action.qualified_name,
            selection=result.selection,
            convention=(
                f"{convention.convention_type}.{convention.name}" if convention is not None else None
            ),
            outcomes=[OutcomeReport.from_outcome(outcome) for outcome in result.outcomes],
            error_type=type_reference(result.error_type) or "",
            error_type_scope=result.error_type_scope,
        )


class DescriptionReport(ReportModel):
    """Inferred response metadata for every action of one module."""

    module: str
    actions: list[ActionReport] = Field(default_factory=list)

    @property
    def unmatched(self) -> list[ActionReport]:
        return [report for report in self.actions if report.selection is SelectionKind.NONE]
