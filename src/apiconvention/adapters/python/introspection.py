"""Reflection over Python classes into the inference domain model.

- controller classes become ``DeclaringType`` chains following their MRO
- public instance methods become ``Action``s linked to the base-class
  methods they override
- public static methods of a convention class become ``ConventionDefinition``s
- parameter-level match behaviours are read from ``typing.Annotated`` metadata
"""

from __future__ import annotations

import inspect
import logging
import sys
import typing
from typing import TYPE_CHECKING, Annotated

from apiconvention.domain.inference import read_annotations as default_read_annotations
from apiconvention.domain.model import (
    Action,
    Annotation,
    ApiConventionType,
    ConventionDefinition,
    ConventionSource,
    DeclaringType,
    Module,
    Parameter,
    ParameterKind,
)

from .decorators import CONTROLLER_ATTR, NON_ACTION_ATTR, attached_annotations
from .errors import ConventionLookupError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import ModuleType

    from apiconvention.domain.ports import AnnotationReader

log = logging.getLogger(__name__)

_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def qualified_name(obj: type | ModuleType) -> str:
    if isinstance(obj, type):
        return f"{obj.__module__}.{obj.__qualname__}"
    return obj.__name__


def build_module(module: ModuleType) -> Module:
    return Module(name=module.__name__, annotations=attached_annotations(module))


def build_declaring_type(cls: type) -> DeclaringType:
    """Return ``cls`` as a declaring type whose ``base`` chain follows the MRO."""

    declaring_type: DeclaringType | None = None
    for klass in reversed(_own_mro(cls)):
        declaring_type = DeclaringType(
            name=klass.__qualname__,
            module=_module_of(klass),
            annotations=attached_annotations(klass),
            base=declaring_type,
        )
    if declaring_type is None:
        raise TypeError(f"Cannot describe {cls!r} as a declaring type")
    return declaring_type


def build_actions(cls: type) -> tuple[Action, ...]:
    """Return the public actions of a controller class, own methods first.

    A name defined lower in the MRO shadows base-class definitions, whether or
    not it is itself an action.
    """

    mro = _own_mro(cls)
    seen: set[str] = set()
    actions: list[Action] = []
    for index, klass in enumerate(mro):
        for name, value in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if _is_action(name, value):
                actions.append(_build_action(mro[index:], name))
    return tuple(actions)


def build_convention_source(convention_type: type) -> ConventionSource:
    """Collect the public static methods of ``convention_type`` in definition order."""

    definitions = tuple(
        _build_definition(convention_type, name, value.__func__)
        for name, value in vars(convention_type).items()
        if _is_convention_method(name, value)
    )
    return ConventionSource(name=qualified_name(convention_type), definitions=definitions)


def build_convention_definition(convention_type: type, method_name: str) -> ConventionDefinition:
    value = vars(convention_type).get(method_name)
    if not _is_convention_method(method_name, value):
        raise ConventionLookupError(convention_type, method_name)
    return _build_definition(convention_type, method_name, value.__func__)


def convention_sources_for(
    cls: type,
    *,
    read_annotations: AnnotationReader | None = None,
) -> tuple[ConventionSource, ...]:
    """Convention libraries declared on the controller, else on its module."""

    reader = read_annotations or default_read_annotations
    declaring_type = build_declaring_type(cls)
    convention_types = _convention_types(reader(declaring_type, inherit=True)) or _convention_types(
        reader(declaring_type.module, inherit=False)
    )
    return tuple(build_convention_source(convention_type) for convention_type in convention_types)


def find_controllers(module: ModuleType) -> tuple[type, ...]:
    """Controller classes defined in ``module``, in definition order."""

    return tuple(
        value
        for value in vars(module).values()
        if isinstance(value, type)
        and value.__module__ == module.__name__
        and getattr(value, CONTROLLER_ATTR, False)
    )


def _own_mro(cls: type) -> tuple[type, ...]:
    return tuple(klass for klass in cls.__mro__ if klass is not object)


def _module_of(cls: type) -> Module:
    module = sys.modules.get(cls.__module__)
    if module is None:
        return Module(name=cls.__module__)
    return build_module(module)


def _is_action(name: str, value: object) -> bool:
    return (
        inspect.isfunction(value)
        and not name.startswith("_")
        and not getattr(value, NON_ACTION_ATTR, False)
    )


def _is_convention_method(name: str, value: object) -> typing.TypeGuard[staticmethod]:
    return isinstance(value, staticmethod) and not name.startswith("_")


def _build_action(chain: tuple[type, ...], name: str) -> Action:
    klass = chain[0]
    function = vars(klass)[name]

    overrides: Action | None = None
    for index, base in enumerate(chain[1:], start=1):
        if inspect.isfunction(vars(base).get(name)):
            overrides = _build_action(chain[index:], name)
            break

    parameters, return_type = _signature_of(function, skip_first=True)
    return Action(
        name=name,
        declaring_type=build_declaring_type(klass),
        parameters=parameters,
        return_type=return_type,
        annotations=attached_annotations(function),
        overrides=overrides,
    )


def _build_definition(
    convention_type: type,
    name: str,
    function: Callable[..., object],
) -> ConventionDefinition:
    parameters, return_type = _signature_of(function, skip_first=False)
    return ConventionDefinition(
        name=name,
        convention_type=qualified_name(convention_type),
        parameters=parameters,
        return_type=return_type,
        annotations=attached_annotations(function),
    )


def _signature_of(
    function: Callable[..., object],
    *,
    skip_first: bool,
) -> tuple[tuple[Parameter, ...], object | None]:
    hints = _type_hints(function)
    parameters = list(inspect.signature(function).parameters.values())
    if skip_first:
        parameters = parameters[1:]
    built = tuple(_build_parameter(parameter, hints.get(parameter.name)) for parameter in parameters)
    return_type, _ = _split_annotated(hints.get("return"))
    return built, return_type


def _type_hints(function: Callable[..., object]) -> dict[str, object]:
    try:
        return typing.get_type_hints(function, include_extras=True)
    except (NameError, SyntaxError, TypeError) as exc:
        log.warning("Cannot resolve type hints of %s: %s", function.__qualname__, exc)
        return {}


def _build_parameter(parameter: inspect.Parameter, hint: object | None) -> Parameter:
    annotation, annotations = _split_annotated(hint)
    kind = ParameterKind.VARIADIC if parameter.kind in _VARIADIC_KINDS else ParameterKind.POSITIONAL
    return Parameter(
        name=parameter.name,
        annotation=annotation,
        kind=kind,
        annotations=annotations,
    )


def _split_annotated(hint: object | None) -> tuple[object | None, tuple[Annotation, ...]]:
    if typing.get_origin(hint) is not Annotated:
        return hint, ()
    base, *metadata = typing.get_args(hint)
    return base, tuple(item for item in metadata if isinstance(item, Annotation))


def _convention_types(annotations: tuple[Annotation, ...]) -> tuple[type, ...]:
    return tuple(
        annotation.convention_type
        for annotation in annotations
        if isinstance(annotation, ApiConventionType)
    )
