from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)


class ParcelStatus(str, enum.Enum):
    """Delivery lifecycle: registered -> sent -> delivered."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def next(self) -> Optional["ParcelStatus"]:
        if self is ParcelStatus.REGISTERED:
            return ParcelStatus.SENT
        if self is ParcelStatus.SENT:
            return ParcelStatus.DELIVERED
        return None


class Parcel(BaseModel):
    client: int
    address: str
    status: ParcelStatus = ParcelStatus.REGISTERED
    created_at: str = Field(default_factory=utc_now)  # RFC3339, UTC
    number: int | None = None  # assigned by storage on insert
