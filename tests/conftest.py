from __future__ import annotations

import pytest

from apiconvention.adapters.python import build_convention_source
from apiconvention.conventions import DefaultApiConventions
from apiconvention.domain.model import ConventionSource  # noqa: TC001


@pytest.fixture(scope="session")
def default_convention_source() -> ConventionSource:
    return build_convention_source(DefaultApiConventions)
