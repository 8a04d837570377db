"""Enums for compliance types and consent statuses.

These values mirror the strings stored by the front-end banner, so they
can be compared directly against cookie values.
"""

from __future__ import annotations

__all__ = [
    "ComplianceType",
    "ConsentStatus",
    "parse_compliance_type",
    "parse_status",
]

from enum import Enum

from cookieconsent.constants import (
    COMPLIANCE_TYPE_INFO,
    COMPLIANCE_TYPE_OPT_IN,
    COMPLIANCE_TYPE_OPT_OUT,
    COMPLIANCE_TYPES,
    STATUS_ALLOWED,
    STATUS_DENIED,
    STATUS_DISMISSED,
    STATUSES,
)
from cookieconsent.exceptions import ConfigError


class ComplianceType(str, Enum):
    """Site-wide consent policy.

    Inherits from str for easy serialization and comparison.

    Attributes:
        INFO: Cookies are used, the banner only informs the visitor.
        OPT_IN: Optional cookies need explicit consent ("allow").
        OPT_OUT: Optional cookies are used until the visitor refuses them.
    """

    INFO = COMPLIANCE_TYPE_INFO
    OPT_IN = COMPLIANCE_TYPE_OPT_IN
    OPT_OUT = COMPLIANCE_TYPE_OPT_OUT


class ConsentStatus(str, Enum):
    """Recorded banner interaction (value of the `cookieconsent_status` cookie).

    An unanswered banner is represented by None, not by an enum member.

    Attributes:
        DENY: Visitor refused cookies.
        DISMISS: Visitor closed the banner (accepts under info/opt-out).
        ALLOW: Visitor explicitly accepted cookies (opt-in).
    """

    DENY = STATUS_DENIED
    DISMISS = STATUS_DISMISSED
    ALLOW = STATUS_ALLOWED


def parse_compliance_type(value: ComplianceType | str | None) -> ComplianceType:
    """Convert a configured value to ComplianceType.

    Raises:
        ConfigError: If value is not one of info, opt-in, opt-out.
    """
    try:
        return ComplianceType(value)
    except ValueError:
        valid = ", ".join(COMPLIANCE_TYPES)
        raise ConfigError(
            f"Invalid compliance type {value!r}. Expected one of: {valid}.",
            field="compliance_type",
        ) from None


def parse_status(value: ConsentStatus | str | None) -> ConsentStatus | None:
    """Convert a caller-supplied status to ConsentStatus.

    Empty values (None, "") mean "not supplied" and return None.

    Raises:
        ConfigError: If a non-empty value is not deny, dismiss or allow.
    """
    if not value:
        return None
    try:
        return ConsentStatus(value)
    except ValueError:
        valid = ", ".join(STATUSES)
        raise ConfigError(
            f"Invalid consent status {value!r}. Expected one of: {valid}.",
            field="status",
        ) from None
