"""Domain port definitions for collaborators of the inference core."""

from __future__ import annotations

from .annotations import AnnotatedEntity, AnnotationReader
from .conventions import ConventionMatcher, DeclaredConventionLookup

__all__ = [
    "AnnotatedEntity",
    "AnnotationReader",
    "ConventionMatcher",
    "DeclaredConventionLookup",
]
