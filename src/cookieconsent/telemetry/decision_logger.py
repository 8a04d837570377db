"""Decision logging for consent evaluation.

Every ConsentPolicy.is_allowed() evaluation can be logged as a structured
event. Events are emitted at DEBUG level on the "cookieconsent.decisions"
logger, so they cost nothing unless a handler is configured (see
create_decision_logger).
"""

from __future__ import annotations

__all__ = [
    "DecisionEventLogger",
    "create_decision_logger",
    "get_decision_logger",
]

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from cookieconsent.constants import APP_NAME
from cookieconsent.utils.logging.logger_setup import setup_jsonl_logger

if TYPE_CHECKING:
    from cookieconsent.engine.decision import CategoryDecision
    from cookieconsent.engine.status import ComplianceType, ConsentStatus

DECISION_LOGGER_NAME = f"{APP_NAME}.decisions"


def get_decision_logger() -> logging.Logger:
    """Get the decision logger without configuring handlers."""
    return logging.getLogger(DECISION_LOGGER_NAME)


def create_decision_logger(log_path: Path) -> logging.Logger:
    """Create decision logger writing JSONL to log_path.

    Args:
        log_path: Path to decisions.jsonl file.

    Returns:
        Configured logger instance (DEBUG level).
    """
    return setup_jsonl_logger(DECISION_LOGGER_NAME, log_path, log_level=logging.DEBUG)


class DecisionEventLogger:
    """Logs consent decision events as dict messages."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize decision event logger.

        Args:
            logger: Target logger. Defaults to get_decision_logger().
        """
        self._logger = logger if logger is not None else get_decision_logger()

    def log_decision(
        self,
        decision: "CategoryDecision",
        *,
        compliance_type: "ComplianceType",
        status: "ConsentStatus | None",
    ) -> None:
        """Log a single decision.

        Args:
            decision: The evaluated decision.
            compliance_type: Compliance type of the policy.
            status: Status cached by the policy at evaluation time.
        """
        if not self._logger.isEnabledFor(logging.DEBUG):
            return

        self._logger.debug(
            {
                "event": "consent_decision",
                "category": decision.category,
                "allowed": decision.allowed,
                "reason": decision.reason.value,
                "compliance_type": compliance_type.value,
                "status": status.value if status is not None else None,
            }
        )
