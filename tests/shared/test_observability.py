"""Structured logging setup tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from user_management_backend.shared import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_get_logger_binds_module_name() -> None:
    logger = get_logger("user_management_backend.example")

    with capture_logs() as logs:
        logger.info("example_event", answer=42)

    assert logs == [
        {
            "event": "example_event",
            "answer": 42,
            "log_level": "info",
            "logger_name": "user_management_backend.example",
        }
    ]


def test_logger_created_before_configuration_follows_it(
    capsys: pytest.CaptureFixture[str],
) -> None:
    logger = get_logger("early")
    configure_logging("INFO", "json")

    logger.info("late_event")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "late_event"
    assert record["logger"] == "early"


def test_json_records_carry_timestamp_level_and_logger(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging("INFO", "json")

    get_logger("user_management_backend.example").warning("disk_low", free_mb=12)

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "disk_low"
    assert record["level"] == "warning"
    assert record["logger"] == "user_management_backend.example"
    assert record["free_mb"] == 12
    assert "T" in record["timestamp"]
    assert "logger_name" not in record


def test_json_records_render_tracebacks(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO", "json")

    try:
        msg = "boom"
        raise RuntimeError(msg)
    except RuntimeError:
        get_logger("faults").exception("failed")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["level"] == "error"
    assert "RuntimeError: boom" in record["exception"]


def test_level_filter_drops_lower_records(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING", "json")
    logger = get_logger("filtered")

    logger.info("ignored")
    logger.warning("kept")

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["kept"]


def test_console_format_renders_event_name(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO", "console")

    get_logger("console").info("console_event")

    assert "console_event" in capsys.readouterr().out
