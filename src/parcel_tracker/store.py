"""SQLite persistence for parcels.

The store borrows an open connection and never opens or closes it. Every
public method is one statement plus a commit; ``sqlite3.Error`` propagates
to the caller untouched.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Union

from .errors import ParcelNotFoundError
from .models import Parcel, ParcelStatus


logger = logging.getLogger("tracker.store")

_COLUMNS = "number, client, status, address, created_at"


class ParcelStore:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    @staticmethod
    def _row_to_parcel(row) -> Parcel:
        # Works for both sqlite3.Row and plain tuples in _COLUMNS order.
        number, client, status, address, created_at = tuple(row)
        return Parcel(
            number=int(number),
            client=int(client),
            status=ParcelStatus(status),
            address=str(address),
            created_at=str(created_at),
        )

    def add(self, parcel: Parcel) -> int:
        cur = self.conn.execute(
            "INSERT INTO parcel (client, status, address, created_at) VALUES (?, ?, ?, ?)",
            (
                parcel.client,
                ParcelStatus(parcel.status).value,
                parcel.address,
                parcel.created_at,
            ),
        )
        self.conn.commit()
        number = int(cur.lastrowid)
        logger.debug("parcel added", extra={"number": number, "client": parcel.client})
        return number

    def get(self, number: int) -> Parcel:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE number = ?",
            (number,),
        ).fetchone()
        if row is None:
            raise ParcelNotFoundError(number)
        return self._row_to_parcel(row)

    def get_by_client(self, client: int) -> List[Parcel]:
        rows = self.conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE client = ?",
            (client,),
        ).fetchall()
        return [self._row_to_parcel(row) for row in rows]

    def delete(self, number: int) -> bool:
        """Delete a registered parcel.

        Returns False when nothing was removed, either because the parcel
        does not exist or because it already left the registered state.
        """
        cur = self.conn.execute(
            "DELETE FROM parcel WHERE number = ? AND status = ?",
            (number, ParcelStatus.REGISTERED.value),
        )
        self.conn.commit()
        deleted = cur.rowcount > 0
        logger.debug("parcel delete", extra={"number": number, "affected": deleted})
        return deleted

    def set_address(self, number: int, address: str) -> bool:
        """Change the address of a registered parcel; same return contract as delete()."""
        cur = self.conn.execute(
            "UPDATE parcel SET address = ? WHERE number = ? AND status = ?",
            (address, number, ParcelStatus.REGISTERED.value),
        )
        self.conn.commit()
        updated = cur.rowcount > 0
        logger.debug("parcel address", extra={"number": number, "affected": updated})
        return updated

    def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        # Unconditional write; transition order is checked by ParcelService.
        value = ParcelStatus(status).value
        self.conn.execute(
            "UPDATE parcel SET status = ? WHERE number = ?",
            (value, number),
        )
        self.conn.commit()
        logger.debug("parcel status", extra={"number": number, "status": value})
