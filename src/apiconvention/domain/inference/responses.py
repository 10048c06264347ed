"""Response outcome inference from API conventions.

Precedence:
1) a convention the action is pinned to via ``ApiConventionMethod``
2) the first candidate, across sources in order, that structurally matches
3) nothing: an empty outcome tuple

Outcomes are the winner's own ``Outcome`` annotations in discovery order.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from apiconvention.domain.matching import match_convention
from apiconvention.domain.model import ApiConventionMethod, Outcome

from .annotations import read_annotations as default_read_annotations
from .contracts import ConventionSelection, SelectionKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apiconvention.domain.model import Action, ConventionDefinition, ConventionSource
    from apiconvention.domain.ports import (
        AnnotationReader,
        ConventionMatcher,
        DeclaredConventionLookup,
    )

log = logging.getLogger(__name__)


def find_declared_convention(
    action: Action,
    *,
    read_annotations: AnnotationReader | None = None,
) -> ConventionDefinition | None:
    """Return the convention pinned on ``action`` (or an action it overrides)."""

    reader = read_annotations or default_read_annotations
    for annotation in reader(action, inherit=True):
        if isinstance(annotation, ApiConventionMethod):
            return annotation.method
    return None


def select_convention(
    action: Action,
    sources: Sequence[ConventionSource],
    *,
    matcher: ConventionMatcher | None = None,
    read_annotations: AnnotationReader | None = None,
    declared_convention: DeclaredConventionLookup | None = None,
) -> ConventionSelection:
    """Pick the convention definition that describes ``action``."""

    lookup = declared_convention or partial(
        find_declared_convention,
        read_annotations=read_annotations,
    )
    declared = lookup(action)
    if declared is not None:
        log.debug("%s pinned to convention %s", action.qualified_name, declared.name)
        return ConventionSelection(kind=SelectionKind.DECLARED, convention=declared)

    is_match = matcher or match_convention
    for source in sources:
        for candidate in source.definitions:
            if is_match(action, candidate):
                log.debug(
                    "%s matched convention %s.%s",
                    action.qualified_name,
                    source.name,
                    candidate.name,
                )
                return ConventionSelection(
                    kind=SelectionKind.MATCHED,
                    convention=candidate,
                    source=source.name,
                )

    log.debug("No convention applies to %s", action.qualified_name)
    return ConventionSelection(kind=SelectionKind.NONE)


def outcomes_of(
    convention: ConventionDefinition,
    *,
    read_annotations: AnnotationReader | None = None,
) -> tuple[Outcome, ...]:
    reader = read_annotations or default_read_annotations
    return tuple(
        annotation
        for annotation in reader(convention, inherit=False)
        if isinstance(annotation, Outcome)
    )


def resolve_response_outcomes(
    action: Action,
    sources: Sequence[ConventionSource],
    *,
    matcher: ConventionMatcher | None = None,
    read_annotations: AnnotationReader | None = None,
    declared_convention: DeclaredConventionLookup | None = None,
) -> tuple[Outcome, ...]:
    """Return the outcomes declared by the convention that applies to ``action``."""

    selection = select_convention(
        action,
        sources,
        matcher=matcher,
        read_annotations=read_annotations,
        declared_convention=declared_convention,
    )
    if selection.convention is None:
        return ()
    return outcomes_of(selection.convention, read_annotations=read_annotations)
