"""Package initializer for `parcel_tracker`."""

from .errors import ParcelNotFoundError, ParcelStatusError
from .models import Parcel, ParcelStatus
from .service import ParcelService
from .store import ParcelStore

__all__ = [
    "Parcel",
    "ParcelNotFoundError",
    "ParcelService",
    "ParcelStatus",
    "ParcelStatusError",
    "ParcelStore",
]
