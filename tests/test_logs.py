import json
import logging

from parcel_tracker.logs import configure_logging


def test_json_lines_include_extra_fields(capsys):
    configure_logging("DEBUG", json_lines=True)
    logging.getLogger("tracker.store").debug("parcel added", extra={"number": 3, "client": 9})

    lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    payload = json.loads(lines[-1])
    assert payload["message"] == "parcel added"
    assert payload["logger"] == "tracker.store"
    assert payload["number"] == 3
    assert payload["client"] == 9


def test_level_filters_records(capsys):
    configure_logging("WARNING")
    logging.getLogger("tracker.service").info("quiet")
    logging.getLogger("tracker.service").warning("loud")

    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "WARNING tracker.service: loud" in err


def test_reconfigure_replaces_handler():
    configure_logging("INFO")
    logger = configure_logging("INFO", json_lines=True)
    assert len(logger.handlers) == 1
