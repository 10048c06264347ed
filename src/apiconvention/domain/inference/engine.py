"""Entry point combining response-outcome and error-type inference.

Both resolvers read disjoint data and share no state, so results for many
actions can be computed in any order (or concurrently) without coordination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apiconvention.domain.model import ProblemDetails

from .contracts import ResolutionResult
from .error_type import select_error_type
from .responses import outcomes_of, select_convention

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from apiconvention.domain.model import Action, ConventionSource
    from apiconvention.domain.ports import (
        AnnotationReader,
        ConventionMatcher,
        DeclaredConventionLookup,
    )


def resolve_all(
    action: Action,
    sources: Sequence[ConventionSource],
    *,
    matcher: ConventionMatcher | None = None,
    read_annotations: AnnotationReader | None = None,
    declared_convention: DeclaredConventionLookup | None = None,
    default_error_type: type = ProblemDetails,
) -> ResolutionResult:
    """Infer outcomes and error type for ``action``."""

    selection = select_convention(
        action,
        sources,
        matcher=matcher,
        read_annotations=read_annotations,
        declared_convention=declared_convention,
    )
    error_type = select_error_type(
        action,
        read_annotations=read_annotations,
        default_error_type=default_error_type,
    )
    outcomes = (
        outcomes_of(selection.convention, read_annotations=read_annotations)
        if selection.convention is not None
        else ()
    )
    return ResolutionResult(
        outcomes=outcomes,
        error_type=error_type.error_type,
        selection=selection.kind,
        convention=selection.convention,
        error_type_scope=error_type.scope,
    )


@dataclass(slots=True, kw_only=True)
class ConventionInference:
    """Resolve actions with a fixed set of collaborators."""

    matcher: ConventionMatcher | None = None
    read_annotations: AnnotationReader | None = None
    declared_convention: DeclaredConventionLookup | None = None
    default_error_type: type = ProblemDetails

    def resolve(self, action: Action, sources: Sequence[ConventionSource]) -> ResolutionResult:
        return resolve_all(
            action,
            sources,
            matcher=self.matcher,
            read_annotations=self.read_annotations,
            declared_convention=self.declared_convention,
            default_error_type=self.default_error_type,
        )

    def resolve_many(
        self,
        actions: Iterable[Action],
        sources: Sequence[ConventionSource],
    ) -> tuple[ResolutionResult, ...]:
        """Resolve every action against the same sources, preserving input order."""

        return tuple(self.resolve(action, sources) for action in actions)
