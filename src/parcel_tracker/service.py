from __future__ import annotations

import logging
from typing import List

from .errors import ParcelStatusError
from .models import Parcel, ParcelStatus, utc_now
from .store import ParcelStore


logger = logging.getLogger("tracker.service")


class ParcelService:
    """Workflow rules on top of ParcelStore.

    The store only mirrors rows; this layer rejects out-of-order status
    changes and edits of parcels that already left the registered state.
    """

    def __init__(self, store: ParcelStore) -> None:
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            address=address,
            status=ParcelStatus.REGISTERED,
            created_at=utc_now(),
        )
        parcel.number = self.store.add(parcel)
        logger.info("parcel registered", extra={"number": parcel.number, "client": client})
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> ParcelStatus:
        parcel = self.store.get(number)
        following = parcel.status.next()
        if following is None:
            logger.info("parcel already delivered", extra={"number": number})
            raise ParcelStatusError(
                number, parcel.status.value, f"parcel {number} is already delivered"
            )
        self.store.set_status(number, following)
        return following

    def change_address(self, number: int, address: str) -> None:
        self._require_registered(number, "address change")
        if not self.store.set_address(number, address):
            self._raise_skipped_write(number, "address change")

    def delete(self, number: int) -> None:
        self._require_registered(number, "delete")
        if not self.store.delete(number):
            self._raise_skipped_write(number, "delete")

    def _raise_skipped_write(self, number: int, action: str) -> None:
        # The guarded statement matched no row: the parcel moved on or vanished
        # after it was checked. Re-reading raises the matching error.
        parcel = self._require_registered(number, action)
        raise ParcelStatusError(
            number,
            parcel.status.value,
            f"{action} not applied: parcel {number} changed concurrently",
        )

    def _require_registered(self, number: int, action: str) -> Parcel:
        parcel = self.store.get(number)
        if parcel.status is not ParcelStatus.REGISTERED:
            logger.info(
                "%s rejected", action, extra={"number": number, "status": parcel.status.value}
            )
            raise ParcelStatusError(
                number,
                parcel.status.value,
                f"{action} not allowed: parcel {number} is {parcel.status.value}",
            )
        return parcel
