"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class NameMatchBehavior(StrEnum):
    """How a convention name is compared with an action or parameter name."""

    ANY = "any"
    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"


class TypeMatchBehavior(StrEnum):
    """How a convention parameter type is compared with an action parameter type."""

    ANY = "any"
    ASSIGNABLE_FROM = "assignable_from"


class ParameterKind(StrEnum):
    POSITIONAL = "positional"
    VARIADIC = "variadic"
