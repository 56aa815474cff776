# tests/test_logging_config.py
import json

import pytest
import structlog

from incant.shared.config import settings
from incant.shared.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()


def test_defaults_come_from_settings(capsys, monkeypatch):
    monkeypatch.setattr(settings, "LOG_FORMAT", "json")
    monkeypatch.setattr(settings, "LOG_LEVEL", "info")

    configure_logging()
    structlog.get_logger().info("dialect_built", dialect="v1")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "dialect_built"
    assert event["dialect"] == "v1"
    assert event["level"] == "info"


def test_level_filters_events(capsys):
    configure_logging(log_format="console", level="warning")
    structlog.get_logger().info("decode_success")
    assert "decode_success" not in capsys.readouterr().err
