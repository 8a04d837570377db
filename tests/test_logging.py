"""Tests for JSONL logging, decision events and logging configuration."""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cookieconsent.config import LoggingConfig
from cookieconsent.engine import CategoryDecision, ComplianceType, ConsentStatus, DecisionReason
from cookieconsent.telemetry.decision_logger import DECISION_LOGGER_NAME, DecisionEventLogger
from cookieconsent.telemetry.system_logger import ConsoleFormatter, get_system_logger
from cookieconsent.utils.logging.iso_formatter import ISO8601Formatter
from cookieconsent.utils.logging.logger_setup import setup_jsonl_logger


def _record(msg, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, msg, None, None)


@pytest.fixture
def decision() -> CategoryDecision:
    return CategoryDecision(category="ads", allowed=False, reason=DecisionReason.OVERRIDE)


@pytest.fixture(autouse=True)
def reset_loggers():
    """Restore logger levels and handlers touched by a test."""
    yield
    for name in (DECISION_LOGGER_NAME, "cookieconsent.test"):
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
    get_system_logger().setLevel(logging.INFO)


# ============================================================================
# Formatters
# ============================================================================


class TestISO8601Formatter:
    """Tests for JSONL formatting."""

    def test_dict_message(self) -> None:
        """Given a dict message, merges its fields into the entry."""
        # Act
        line = ISO8601Formatter().format(_record({"event": "consent_decision", "allowed": True}))

        # Assert
        entry = json.loads(line)
        assert entry["event"] == "consent_decision"
        assert entry["allowed"] is True
        assert entry["level"] == "INFO"
        assert entry["time"].endswith("Z")

    def test_string_message(self) -> None:
        # Act
        entry = json.loads(ISO8601Formatter().format(_record("plain text")))

        # Assert
        assert entry["message"] == "plain text"


class TestConsoleFormatter:
    """Tests for human-readable console output."""

    @pytest.mark.parametrize(
        "msg,expected",
        [
            ({"event": "invalid_status_cookie", "message": "Ignoring cookie"}, "WARNING: Ignoring cookie"),
            ({"event": "invalid_status_cookie"}, "WARNING: invalid_status_cookie"),
            ("plain", "WARNING: plain"),
        ],
    )
    def test_format(self, msg, expected: str) -> None:
        assert ConsoleFormatter().format(_record(msg, logging.WARNING)) == expected


# ============================================================================
# JSONL logger setup
# ============================================================================


class TestSetupJsonlLogger:
    """Tests for setup_jsonl_logger."""

    def test_writes_jsonl(self, tmp_path: Path) -> None:
        """Given a nested path, creates the directory and appends one line per record."""
        # Arrange
        log_file = tmp_path / "nested" / "test.jsonl"
        logger = setup_jsonl_logger("cookieconsent.test", log_file)

        # Act
        logger.info({"event": "one"})
        logger.info({"event": "two"})

        # Assert
        lines = log_file.read_text().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["one", "two"]

    def test_repeated_setup_does_not_duplicate(self, tmp_path: Path) -> None:
        # Arrange
        log_file = tmp_path / "test.jsonl"
        setup_jsonl_logger("cookieconsent.test", log_file)

        # Act
        logger = setup_jsonl_logger("cookieconsent.test", log_file)

        # Assert
        assert len(logger.handlers) == 1


# ============================================================================
# Decision events
# ============================================================================


class TestDecisionEventLogger:
    """Tests for DecisionEventLogger."""

    def test_skips_when_debug_disabled(self, decision: CategoryDecision) -> None:
        # Arrange
        logger = MagicMock()
        logger.isEnabledFor.return_value = False

        # Act
        DecisionEventLogger(logger).log_decision(
            decision, compliance_type=ComplianceType.OPT_IN, status=None
        )

        # Assert
        logger.debug.assert_not_called()

    def test_logs_decision_fields(self, tmp_path: Path, decision: CategoryDecision) -> None:
        """Given a DEBUG logger, logs one event with decision and policy fields."""
        # Arrange
        log_file = tmp_path / "decisions.jsonl"
        logger = setup_jsonl_logger(DECISION_LOGGER_NAME, log_file, log_level=logging.DEBUG)

        # Act
        DecisionEventLogger(logger).log_decision(
            decision, compliance_type=ComplianceType.OPT_OUT, status=ConsentStatus.DENY
        )

        # Assert
        entry = json.loads(log_file.read_text())
        assert entry["event"] == "consent_decision"
        assert entry["category"] == "ads"
        assert entry["allowed"] is False
        assert entry["reason"] == "override"
        assert entry["compliance_type"] == "opt-out"
        assert entry["status"] == "deny"


# ============================================================================
# LoggingConfig
# ============================================================================


class TestLoggingConfig:
    """Tests for LoggingConfig.configure."""

    def test_defaults(self) -> None:
        # Act
        config = LoggingConfig()

        # Assert
        assert config.log_level == "INFO"
        assert config.system_log_file is None
        assert config.decision_log_file is None

    def test_without_decision_log(self) -> None:
        """Given no decision_log_file, returns None and sets the system level."""
        # Act
        result = LoggingConfig(log_level="ERROR").configure()

        # Assert
        assert result is None
        assert get_system_logger().level == logging.ERROR

    def test_with_decision_log(self, tmp_path: Path) -> None:
        # Act
        result = LoggingConfig(decision_log_file=str(tmp_path / "decisions.jsonl")).configure()

        # Assert
        assert isinstance(result, DecisionEventLogger)
        assert logging.getLogger(DECISION_LOGGER_NAME).isEnabledFor(logging.DEBUG)

    def test_rejects_unknown_level(self) -> None:
        # Act & Assert
        with pytest.raises(ValueError):
            LoggingConfig(log_level="TRACE")
