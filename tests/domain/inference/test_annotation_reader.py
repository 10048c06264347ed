from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from apiconvention.domain.inference import read_annotations
from apiconvention.domain.model import ApiErrorType, Outcome
from apiconvention.domain.model.annotations import Annotation
from tests.support.entities import (
    CustomError,
    ModuleError,
    TypeLevelError,
    make_action,
    make_convention,
    make_module,
    make_type,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class _LocalOnly(Annotation):
    INHERITED: ClassVar[bool] = False

    tag: str


def test_reader_returns_own_annotations_without_inherit() -> None:
    base = make_action("get", annotations=(ApiErrorType(error_type=TypeLevelError),))
    action = make_action(
        "get",
        annotations=(ApiErrorType(error_type=CustomError),),
        overrides=base,
    )

    assert read_annotations(action, inherit=False) == (ApiErrorType(error_type=CustomError),)


def test_reader_walks_action_override_chain_nearest_first() -> None:
    root = make_action("get", annotations=(ApiErrorType(error_type=ModuleError),))
    middle = make_action("get", annotations=(ApiErrorType(error_type=TypeLevelError),), overrides=root)
    leaf = make_action("get", overrides=middle)

    assert read_annotations(leaf, inherit=True) == (
        ApiErrorType(error_type=TypeLevelError),
        ApiErrorType(error_type=ModuleError),
    )


def test_reader_skips_non_inheritable_ancestor_annotations() -> None:
    base = make_action("get", annotations=(_LocalOnly(tag="base"),))
    action = make_action("get", annotations=(_LocalOnly(tag="own"),), overrides=base)

    assert read_annotations(action, inherit=True) == (_LocalOnly(tag="own"),)


def test_reader_walks_declaring_type_bases() -> None:
    base = make_type(ApiErrorType(error_type=TypeLevelError), name="BaseController")
    derived = make_type(name="WidgetController", base=base)

    assert read_annotations(derived, inherit=True) == (ApiErrorType(error_type=TypeLevelError),)
    assert read_annotations(derived, inherit=False) == ()


def test_reader_has_no_ancestors_for_modules_and_conventions() -> None:
    module = make_module(ApiErrorType(error_type=ModuleError))
    convention = make_convention("get", outcomes=(Outcome(status_code=200),))

    assert read_annotations(module, inherit=True) == (ApiErrorType(error_type=ModuleError),)
    assert read_annotations(convention, inherit=True) == (Outcome(status_code=200),)
