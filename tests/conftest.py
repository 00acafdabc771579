import random
import sys
import time
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"

# Prefer repo sources over any installed package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def conn(tmp_path):
    from parcel_tracker.db import connect, ensure_schema

    connection = connect(str(tmp_path / "tracker.db"))
    ensure_schema(connection)
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def store(conn):
    from parcel_tracker.store import ParcelStore

    return ParcelStore(conn)


@pytest.fixture
def rng():
    # Time seeded so repeated runs against one DB file pick fresh client ids.
    return random.Random(time.time_ns())


@pytest.fixture
def make_parcel():
    from parcel_tracker.models import Parcel, ParcelStatus, utc_now

    def _make(**overrides):
        values = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": utc_now(),
        }
        values.update(overrides)
        return Parcel(**values)

    return _make


@pytest.fixture
def raw_rows(conn):
    def _rows(sql: str, params=()):
        return [tuple(r) for r in conn.execute(sql, params).fetchall()]

    return _rows
