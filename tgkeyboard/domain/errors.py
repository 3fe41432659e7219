"""
Typed domain errors for tgkeyboard.

Grid operations are total over well-formed grids; these errors cover the
two places where caller input can be rejected outright.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain-specific errors."""


# ---------------------------------------------------------------------------
# Grid transforms
# ---------------------------------------------------------------------------


class InvalidColumnCount(DomainError, ValueError):
    """A reflow was requested with a non-positive or non-integer width."""

    def __init__(self, columns: Any) -> None:
        self.columns = columns
        super().__init__(f"Column count must be a positive integer, got {columns!r}")


# ---------------------------------------------------------------------------
# Markup conversion
# ---------------------------------------------------------------------------


class InvalidButton(DomainError):
    """A button payload cannot be converted to Telegram markup."""

    def __init__(self, button: Any) -> None:
        self.button = button
        super().__init__(f"Button has no 'text' field: {button!r}")
