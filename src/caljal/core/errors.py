from __future__ import annotations
from typing import Optional


class CaljalError(Exception):
    """Base error."""


class ValidationError(CaljalError, ValueError):
    """Raised when externally supplied date fields fall outside their range."""

    def __init__(self, reason: str, max: Optional[int] = None):
        self.reason = reason
        self.max = max
        msg = reason if max is None else f"{reason} (max {max})"
        super().__init__(msg)
