"""Decision result models.

ConsentPolicy answers with plain booleans. These models carry the same
answer together with the rule that produced it, for logging, the CLI and
settings endpoints.
"""

from __future__ import annotations

__all__ = [
    "CategoryDecision",
    "ConsentSnapshot",
    "DecisionReason",
]

from enum import Enum

from pydantic import BaseModel, ConfigDict

from cookieconsent.engine.status import ComplianceType, ConsentStatus


class DecisionReason(str, Enum):
    """Which rule decided an is_allowed() query.

    Attributes:
        NO_REQUEST_CONTEXT: Not inside a live request, always denied.
        GLOBAL: No category given, decided by compliance type and status.
        REQUIRED: Required category, always allowed.
        OVERRIDE: Visitor's explicit per-category choice.
        DEFAULT: No override, fell back to the default category value.
    """

    NO_REQUEST_CONTEXT = "no_request_context"
    GLOBAL = "global"
    REQUIRED = "required"
    OVERRIDE = "override"
    DEFAULT = "default"


class CategoryDecision(BaseModel):
    """Outcome of a single is_allowed() evaluation.

    Attributes:
        category: Category identifier, None for the global decision.
        allowed: Final answer.
        reason: Rule that produced the answer.
    """

    category: str | None
    allowed: bool
    reason: DecisionReason

    model_config = ConfigDict(frozen=True)


class ConsentSnapshot(BaseModel):
    """Every decision of a policy at one point in time.

    Attributes:
        compliance_type: Site-wide policy.
        status: Recorded banner answer, None if unanswered.
        answered: Whether the banner was answered.
        allowed_globally: Global (no category) is_allowed() decision.
        default_category_value: Fallback for categories without override.
        categories: Decision per effective category, in display order.
    """

    compliance_type: ComplianceType
    status: ConsentStatus | None
    answered: bool
    allowed_globally: bool
    default_category_value: bool
    categories: list[CategoryDecision]

    model_config = ConfigDict(frozen=True)

    @property
    def allowed_categories(self) -> list[str]:
        return [d.category for d in self.categories if d.allowed and d.category is not None]
