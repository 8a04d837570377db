"""Consent decision engine.

Computes which cookie categories a visitor currently permits. The engine
is side-effect free: consent data comes in through read-only sources and
decisions go out as booleans.

Structure:
    status.py         - ComplianceType and ConsentStatus enums
    categories.py     - Category models and CategoryRegistry
    sources.py        - StatusSource/OverrideSource protocols, CookieSource
    decision.py       - DecisionReason, CategoryDecision, ConsentSnapshot
    policy.py         - ConsentPolicy evaluation
"""

from cookieconsent.engine.categories import (
    Category,
    CategoryDefinition,
    CategoryRegistry,
    ExtraCategories,
    humanize,
)
from cookieconsent.engine.decision import CategoryDecision, ConsentSnapshot, DecisionReason
from cookieconsent.engine.policy import ConsentPolicy
from cookieconsent.engine.sources import (
    CookieSource,
    OverrideSource,
    RequestContextPredicate,
    StatusSource,
    always_live,
    never_live,
    parse_cookie_bool,
)
from cookieconsent.engine.status import ComplianceType, ConsentStatus

__all__ = [
    # Enums
    "ComplianceType",
    "ConsentStatus",
    # Categories
    "Category",
    "CategoryDefinition",
    "CategoryRegistry",
    "ExtraCategories",
    "humanize",
    # Sources
    "CookieSource",
    "OverrideSource",
    "RequestContextPredicate",
    "StatusSource",
    "always_live",
    "never_live",
    "parse_cookie_bool",
    # Decisions
    "CategoryDecision",
    "ConsentSnapshot",
    "DecisionReason",
    # Policy
    "ConsentPolicy",
]
