"""Errors raised while reading annotations from Python objects."""

from __future__ import annotations


class ConventionLookupError(LookupError):
    """Raised when a referenced convention method does not exist."""

    def __init__(self, convention_type: type, method_name: str) -> None:
        super().__init__(
            f"{convention_type.__qualname__} has no public static method {method_name!r}"
        )
        self.convention_type = convention_type
        self.method_name = method_name
