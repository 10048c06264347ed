"""Ports for locating the convention that applies to an action."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from apiconvention.domain.model import Action, ConventionDefinition


@runtime_checkable
class ConventionMatcher(Protocol):
    """Structural predicate: does ``candidate`` describe ``action``'s signature?"""

    def __call__(self, action: Action, candidate: ConventionDefinition) -> bool: ...


@runtime_checkable
class DeclaredConventionLookup(Protocol):
    """Return the convention an action is explicitly pinned to, if any."""

    def __call__(self, action: Action) -> ConventionDefinition | None: ...


__all__ = ["ConventionMatcher", "DeclaredConventionLookup"]
