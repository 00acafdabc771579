from __future__ import annotations

import pytest


def _reset(monkeypatch, **env):
    from parcel_tracker.settings import reset_settings_cache

    for k, v in env.items():
        if v is None:
            monkeypatch.delenv(k, raising=False)
        else:
            monkeypatch.setenv(k, str(v))
    reset_settings_cache()


def test_defaults(monkeypatch):
    from parcel_tracker.settings import get_settings

    _reset(
        monkeypatch,
        TRACKER_SQLITE_PATH=None,
        TRACKER_LOG_LEVEL=None,
        TRACKER_LOG_JSON=None,
    )
    settings = get_settings()
    assert settings.db_path == "tracker.db"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False


def test_env_overrides_and_cache(monkeypatch, tmp_path):
    from parcel_tracker.settings import get_settings

    db_path = str(tmp_path / "x.db")
    _reset(
        monkeypatch,
        TRACKER_SQLITE_PATH=db_path,
        TRACKER_LOG_LEVEL="debug",
        TRACKER_LOG_JSON="yes",
    )
    settings = get_settings()
    assert settings.db_path == db_path
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True

    # Cached until reset.
    monkeypatch.setenv("TRACKER_LOG_JSON", "0")
    assert get_settings().log_json is True
    _reset(monkeypatch)
    assert get_settings().log_json is False


def test_empty_flag_is_off(monkeypatch):
    from parcel_tracker.settings import get_settings

    _reset(monkeypatch, TRACKER_LOG_JSON="")
    assert get_settings().log_json is False


def test_unrecognised_flag_is_rejected(monkeypatch):
    from parcel_tracker.settings import get_settings

    _reset(monkeypatch, TRACKER_LOG_JSON="maybe")
    with pytest.raises(ValueError, match="TRACKER_LOG_JSON"):
        get_settings()
