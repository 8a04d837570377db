"""cookieconsent: cookie consent decision engine.

Decides which cookie categories a visitor currently permits, based on the
site's compliance type (info, opt-in, opt-out), the recorded banner answer
and per-category choices.

Example:
    from cookieconsent import ConsentConfig

    config = ConsentConfig(compliance_type="opt-in", extra_categories=["newsletter"])
    policy = config.build_policy(cookies=request.cookies)
    if policy.is_allowed("ads"):
        ...
"""

__version__ = "0.1.0"

from cookieconsent.config import ConsentConfig, LoggingConfig
from cookieconsent.engine import (
    Category,
    CategoryDecision,
    CategoryDefinition,
    CategoryRegistry,
    ComplianceType,
    ConsentPolicy,
    ConsentSnapshot,
    ConsentStatus,
    CookieSource,
    DecisionReason,
    OverrideSource,
    StatusSource,
)
from cookieconsent.exceptions import ConfigError, CookieConsentError

__all__ = [
    "__version__",
    # Configuration
    "ConsentConfig",
    "LoggingConfig",
    # Engine
    "Category",
    "CategoryDecision",
    "CategoryDefinition",
    "CategoryRegistry",
    "ComplianceType",
    "ConsentPolicy",
    "ConsentSnapshot",
    "ConsentStatus",
    "CookieSource",
    "DecisionReason",
    "OverrideSource",
    "StatusSource",
    # Errors
    "ConfigError",
    "CookieConsentError",
]
