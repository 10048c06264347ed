from __future__ import annotations

import pytest

from apiconvention.config import (
    DEFAULT_CONVENTIONS_VAR,
    DEFAULT_ERROR_TYPE_VAR,
    InvalidConfigurationError,
    env_flag,
    get_inference_config,
    import_type,
    optional_env_var,
)
from apiconvention.domain.model import ProblemDetails
from tests.support.widgets import ControllerError


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DEFAULT_ERROR_TYPE_VAR, raising=False)
    monkeypatch.delenv(DEFAULT_CONVENTIONS_VAR, raising=False)


def test_defaults_without_environment() -> None:
    config = get_inference_config()

    assert config.default_error_type is ProblemDetails
    assert config.include_default_conventions is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DEFAULT_ERROR_TYPE_VAR, "tests.support.widgets.ControllerError")
    monkeypatch.setenv(DEFAULT_CONVENTIONS_VAR, "off")

    config = get_inference_config()

    assert config.default_error_type is ControllerError
    assert config.include_default_conventions is False


def test_explicit_arguments_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DEFAULT_ERROR_TYPE_VAR, "not.a.module.Thing")
    monkeypatch.setenv(DEFAULT_CONVENTIONS_VAR, "false")

    config = get_inference_config(
        default_error_type="tests.support.widgets:ControllerError",
        include_default_conventions=True,
    )

    assert config.default_error_type is ControllerError
    assert config.include_default_conventions is True


@pytest.mark.parametrize(
    "path",
    ["ProblemDetails", "missing_module_xyz.Thing", "tests.support.widgets.missing", "json.dumps"],
)
def test_import_type_rejects_invalid_paths(path: str) -> None:
    with pytest.raises(InvalidConfigurationError):
        import_type(path)


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", " Yes ")
    assert env_flag("EXAMPLE_FLAG", default=False) is True

    monkeypatch.setenv("EXAMPLE_FLAG", "0")
    assert env_flag("EXAMPLE_FLAG", default=True) is False

    monkeypatch.setenv("EXAMPLE_FLAG", "   ")
    assert env_flag("EXAMPLE_FLAG", default=True) is True

    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")
    with pytest.raises(InvalidConfigurationError, match="EXAMPLE_FLAG"):
        env_flag("EXAMPLE_FLAG", default=True)


def test_optional_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  ")
    assert optional_env_var("EXAMPLE_VAR") is None

    monkeypatch.delenv("EXAMPLE_VAR")
    assert optional_env_var("EXAMPLE_VAR") is None
