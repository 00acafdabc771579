from __future__ import annotations

from typing import Optional


class ParcelNotFoundError(LookupError):
    """Raised when no parcel row matches a number."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"parcel {number} not found")


class ParcelStatusError(ValueError):
    """Raised when an operation is not allowed in the parcel's current status."""

    def __init__(self, number: int, status: str, message: Optional[str] = None) -> None:
        self.number = number
        self.status = status
        super().__init__(message or f"parcel {number} is {status}")
