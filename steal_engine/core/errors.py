from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """Raised when the engine is handed malformed input (missing, non-numeric, NaN)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
