"""Convention libraries shipped with apiconvention."""

from __future__ import annotations

from .default import DefaultApiConventions

__all__ = ["DefaultApiConventions"]
