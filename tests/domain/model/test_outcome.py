from __future__ import annotations

import pytest

from apiconvention.domain.model import DEFAULT_STATUS, ApiConventionType, ApiErrorType, Outcome
from tests.support.entities import Widget


def test_outcome_accepts_status_code_and_payload() -> None:
    outcome = Outcome(status_code=200, payload_type=Widget)

    assert outcome.status_code == 200
    assert outcome.payload_type is Widget
    assert not outcome.is_default


def test_outcome_accepts_default_status() -> None:
    outcome = Outcome(status_code=DEFAULT_STATUS)

    assert outcome.is_default
    assert outcome.payload_type is None


@pytest.mark.parametrize("status_code", [99, 600, 0, -1])
def test_outcome_rejects_out_of_range_status(status_code: int) -> None:
    with pytest.raises(ValueError, match="out of range"):
        Outcome(status_code=status_code)


@pytest.mark.parametrize("status_code", ["200", "Default", True, 200.0])
def test_outcome_rejects_non_integer_status(status_code: object) -> None:
    with pytest.raises(ValueError, match="Invalid status code"):
        Outcome(status_code=status_code)  # type: ignore[arg-type]


def test_outcomes_compare_by_value() -> None:
    assert Outcome(status_code=404) == Outcome(status_code=404)
    assert Outcome(status_code=404) != Outcome(status_code=404, payload_type=Widget)


def test_annotation_inheritance_flags() -> None:
    assert Outcome.INHERITED
    assert ApiErrorType.INHERITED
    assert ApiConventionType.INHERITED
