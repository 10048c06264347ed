from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apiconvention.app import describe_module
from apiconvention.config import InferenceConfig
from apiconvention.domain.inference import ErrorTypeScope, SelectionKind
from tests.support.widgets import ActionError

if TYPE_CHECKING:
    from apiconvention.adapters.report import ActionReport


def _by_action(module_name: str, config: InferenceConfig) -> dict[str, ActionReport]:
    report = describe_module(module_name, config=config)
    return {item.action.rsplit(".", 1)[-1]: item for item in report.actions}


def test_describe_module_reports_every_controller_action() -> None:
    report = describe_module("tests.support.widgets", config=InferenceConfig())

    assert report.module == "tests.support.widgets"
    assert [item.action for item in report.actions] == [
        "tests.support.widgets.WidgetController.get_widget",
        "tests.support.widgets.WidgetController.archive",
        "tests.support.widgets.WidgetController.retire",
        "tests.support.widgets.WidgetController.search",
        "tests.support.widgets.GadgetController.create_gadget",
        "tests.support.widgets.GadgetController.delete",
        "tests.support.widgets.GadgetController.describe",
    ]


def test_describe_module_uses_controller_conventions_first() -> None:
    actions = _by_action("tests.support.widgets", InferenceConfig())

    get_widget = actions["get_widget"]
    assert get_widget.selection is SelectionKind.MATCHED
    assert get_widget.convention == "tests.support.widgets.WidgetConventions.get"
    assert [(o.status_code, o.payload_type) for o in get_widget.outcomes] == [
        (200, "tests.support.widgets.Widget"),
        (404, None),
    ]
    assert get_widget.error_type == "tests.support.widgets.ModuleError"
    assert get_widget.error_type_scope is ErrorTypeScope.MODULE


def test_describe_module_honours_pinned_conventions_and_action_errors() -> None:
    actions = _by_action("tests.support.widgets", InferenceConfig())

    retire = actions["retire"]
    assert retire.selection is SelectionKind.DECLARED
    assert [o.status_code for o in retire.outcomes] == [202, "default"]

    archive = actions["archive"]
    assert archive.error_type == "tests.support.widgets.ActionError"
    assert archive.error_type_scope is ErrorTypeScope.ACTION


def test_describe_module_falls_back_to_default_conventions() -> None:
    actions = _by_action("tests.support.widgets", InferenceConfig())

    assert [o.status_code for o in actions["create_gadget"].outcomes] == [201, 400, "default"]
    assert [o.status_code for o in actions["delete"].outcomes] == [200, 404, 400, "default"]
    assert actions["delete"].error_type == "tests.support.widgets.ControllerError"
    assert actions["describe"].selection is SelectionKind.NONE
    assert actions["search"].selection is SelectionKind.NONE


def test_describe_module_without_default_conventions() -> None:
    actions = _by_action(
        "tests.support.widgets",
        InferenceConfig(default_error_type=ActionError, include_default_conventions=False),
    )

    assert actions["create_gadget"].selection is SelectionKind.NONE
    assert actions["create_gadget"].outcomes == []
    assert actions["get_widget"].selection is SelectionKind.MATCHED


def test_describe_module_resolves_inherited_metadata() -> None:
    actions = _by_action("tests.support.inheritance", InferenceConfig())

    assert list(actions) == ["fetch", "extra", "count"]
    assert [o.status_code for o in actions["fetch"].outcomes] == [200]
    assert actions["fetch"].error_type_scope is ErrorTypeScope.ACTION
    assert actions["extra"].error_type == "tests.support.inheritance.BaseError"
    assert actions["extra"].error_type_scope is ErrorTypeScope.DECLARING_TYPE


def test_describe_module_uses_module_conventions_and_configured_default() -> None:
    report = describe_module(
        "tests.support.module_conventions",
        config=InferenceConfig(default_error_type=ActionError),
    )

    assert [
        (item.action, [o.status_code for o in item.outcomes]) for item in report.actions
    ] == [
        ("tests.support.module_conventions.ReportController.list_all", [200]),
        ("tests.support.module_conventions.OverridingController.list_all", [206]),
    ]
    assert all(
        item.error_type == "tests.support.widgets.ActionError"
        and item.error_type_scope is ErrorTypeScope.DEFAULT
        for item in report.actions
    )


def test_describe_module_propagates_import_errors() -> None:
    with pytest.raises(ModuleNotFoundError):
        describe_module("tests.support.does_not_exist", config=InferenceConfig())
