"""
Structural entities the inference core reads:
modules, declaring types, actions and convention definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apiconvention.domain.model.enums import ParameterKind

if TYPE_CHECKING:
    from apiconvention.domain.model.annotations import Annotation


@dataclass(frozen=True, slots=True, kw_only=True)
class Parameter:
    name: str
    annotation: object | None = None
    kind: ParameterKind = ParameterKind.POSITIONAL
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Module:
    """Top-level unit containing declaring types; the broadest annotation scope."""

    name: str
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class DeclaringType:
    name: str
    module: Module
    annotations: tuple[Annotation, ...] = ()
    base: DeclaringType | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Action:
    """One API operation.

    ``overrides`` points at the action this one overrides on a base declaring
    type, if any; inherited annotations are read along that chain.
    """

    name: str
    declaring_type: DeclaringType
    parameters: tuple[Parameter, ...] = ()
    return_type: object | None = None
    annotations: tuple[Annotation, ...] = ()
    overrides: Action | None = None

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type.module.name}.{self.declaring_type.name}.{self.name}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ConventionDefinition:
    """Candidate convention method: a signature template plus outcome annotations."""

    name: str
    convention_type: str
    parameters: tuple[Parameter, ...] = ()
    return_type: object | None = None
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ConventionSource:
    """Ordered candidate definitions originating from one convention library."""

    name: str
    definitions: tuple[ConventionDefinition, ...] = ()
