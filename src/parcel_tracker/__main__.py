from __future__ import annotations

import argparse
import json
import logging
from typing import Any, List, Optional

from .db import ensure_schema, open_conn
from .errors import ParcelNotFoundError, ParcelStatusError
from .logs import configure_logging
from .models import Parcel
from .service import ParcelService
from .settings import get_settings
from .store import ParcelStore


logger = logging.getLogger("tracker.cli")


def _dump(payload: Any) -> None:
    print(json.dumps(payload))


def _parcel_dict(parcel: Parcel) -> dict:
    return parcel.model_dump(mode="json")


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="parcel_tracker", description="Parcel tracker CLI")
    parser.add_argument("--db", default=settings.db_path, help="SQLite DB path")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (DEBUG, INFO, etc.)",
    )
    parser.add_argument(
        "--log-json",
        action=argparse.BooleanOptionalAction,
        default=settings.log_json,
        help="Emit log records as JSON lines on stderr (default from TRACKER_LOG_JSON)",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)
    sub.add_parser("init-db", help="Create the parcel table if missing")

    p_register = sub.add_parser("register", help="Register a new parcel")
    p_register.add_argument("--client", type=int, required=True)
    p_register.add_argument("--address", required=True)

    p_show = sub.add_parser("show", help="Show one parcel")
    p_show.add_argument("number", type=int)

    p_list = sub.add_parser("list", help="List parcels of a client")
    p_list.add_argument("--client", type=int, required=True)

    p_next = sub.add_parser("next-status", help="Advance a parcel to its next status")
    p_next.add_argument("number", type=int)

    p_addr = sub.add_parser("set-address", help="Change the address of a registered parcel")
    p_addr.add_argument("number", type=int)
    p_addr.add_argument("address")

    p_delete = sub.add_parser("delete", help="Delete a registered parcel")
    p_delete.add_argument("number", type=int)

    p_demo = sub.add_parser("demo", help="Walk one parcel through its whole lifecycle")
    p_demo.add_argument("--client", type=int, default=1)
    return parser


def _run_demo(service: ParcelService, client: int) -> List[dict]:
    steps: List[dict] = []

    parcel = service.register(client, "12 Harbor Road")
    steps.append({"step": "register", "parcel": _parcel_dict(parcel)})
    steps.append(
        {"step": "list", "parcels": [_parcel_dict(p) for p in service.client_parcels(client)]}
    )

    service.change_address(parcel.number, "7 Mill Lane")
    service.next_status(parcel.number)
    steps.append(
        {"step": "list", "parcels": [_parcel_dict(p) for p in service.client_parcels(client)]}
    )

    # A sent parcel can no longer be removed; register a second one to show delete.
    other = service.register(client, "40 Station Street")
    service.delete(other.number)
    steps.append(
        {"step": "list", "parcels": [_parcel_dict(p) for p in service.client_parcels(client)]}
    )
    return steps


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level, json_lines=bool(args.log_json))

    with open_conn(args.db) as conn:
        if args.cmd == "init-db":
            ensure_schema(conn)
            _dump({"ok": True, "db": str(args.db)})
            return 0

        service = ParcelService(ParcelStore(conn))
        try:
            if args.cmd == "register":
                _dump(_parcel_dict(service.register(args.client, args.address)))
            elif args.cmd == "show":
                _dump(_parcel_dict(service.store.get(args.number)))
            elif args.cmd == "list":
                _dump([_parcel_dict(p) for p in service.client_parcels(args.client)])
            elif args.cmd == "next-status":
                status = service.next_status(args.number)
                _dump({"number": args.number, "status": status.value})
            elif args.cmd == "set-address":
                service.change_address(args.number, args.address)
                _dump({"number": args.number, "address": args.address})
            elif args.cmd == "delete":
                service.delete(args.number)
                _dump({"number": args.number, "deleted": True})
            elif args.cmd == "demo":
                ensure_schema(conn)
                _dump({"steps": _run_demo(service, args.client)})
            else:
                return 2
        except ParcelNotFoundError as exc:
            _dump({"error": str(exc), "number": exc.number})
            return 1
        except ParcelStatusError as exc:
            _dump({"error": str(exc), "number": exc.number, "status": exc.status})
            return 2
    return 0


def _safe_main() -> None:
    try:
        raise SystemExit(main())
    except SystemExit:
        raise
    except Exception as exc:
        logger.exception("command failed")
        print(json.dumps({"error": str(exc)}))
        raise SystemExit(1)


if __name__ == "__main__":
    _safe_main()
