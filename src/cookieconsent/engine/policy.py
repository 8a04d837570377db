"""Consent policy - decide which cookie categories are allowed.

Evaluation of is_allowed(category):
1. Not inside a live request      -> False
2. No category                    -> global decision (see below)
3. Required category              -> True (session, usagehelper)
4. Per-category override present  -> the override
5. Otherwise                      -> default category value

Global decision by compliance type:

    compliance type   allowed when status is
    ---------------   ----------------------
    info              dismiss
    opt-out           dismiss
    opt-in            allow

Default category value (computed once, at construction):

    compliance type   unanswered   answered
    ---------------   ----------   ----------------
    info, opt-out     True         global decision
    opt-in            False        global decision

Once the banner is answered every category defaults to the global decision;
individual categories only differ through explicit overrides.

A policy caches the status it read, so build one per request.
"""

from __future__ import annotations

__all__ = ["ConsentPolicy"]

from typing import TYPE_CHECKING

from cookieconsent.engine.categories import CategoryRegistry
from cookieconsent.engine.decision import CategoryDecision, ConsentSnapshot, DecisionReason
from cookieconsent.engine.sources import (
    CookieSource,
    OverrideSource,
    RequestContextPredicate,
    StatusSource,
    always_live,
)
from cookieconsent.engine.status import (
    ComplianceType,
    ConsentStatus,
    parse_compliance_type,
    parse_status,
)

if TYPE_CHECKING:
    from cookieconsent.telemetry.decision_logger import DecisionEventLogger


class ConsentPolicy:
    """Consent decision engine for one visitor.

    Attributes:
        registry: Categories known to the site.
    """

    def __init__(
        self,
        compliance_type: ComplianceType | str,
        *,
        status: ConsentStatus | str | None = None,
        registry: CategoryRegistry | None = None,
        status_source: StatusSource | None = None,
        override_source: OverrideSource | None = None,
        request_context: RequestContextPredicate = always_live,
        decision_logger: "DecisionEventLogger | None" = None,
    ) -> None:
        """Initialize the policy.

        Args:
            compliance_type: info, opt-in or opt-out.
            status: Explicit consent status, e.g. to simulate a visitor.
                If empty, the status is read from status_source.
            registry: Category registry. Defaults to built-in categories only.
            status_source: Where the recorded status comes from. Defaults to
                an empty cookie jar (unanswered).
            override_source: Where per-category choices come from. Defaults to
                status_source when it also implements OverrideSource.
            request_context: Predicate reporting whether a live request is
                being served. is_allowed() is always False otherwise.
            decision_logger: Optional logger for decision events.

        Raises:
            ConfigError: If compliance_type or status is invalid.
        """
        self._compliance_type = parse_compliance_type(compliance_type)
        self.registry = registry if registry is not None else CategoryRegistry()

        self._status_source: StatusSource = status_source if status_source is not None else CookieSource()
        if override_source is None:
            if isinstance(self._status_source, OverrideSource):
                override_source = self._status_source
            else:
                override_source = CookieSource()
        self._override_source: OverrideSource = override_source

        self._request_context = request_context
        self._decision_logger = decision_logger

        self._status = parse_status(status) or self._status_source.read_status()
        self._default_category_value = self._calculate_default_category_value()

    @property
    def compliance_type(self) -> ComplianceType:
        return self._compliance_type

    def is_info(self) -> bool:
        return self._compliance_type is ComplianceType.INFO

    def is_opt_in(self) -> bool:
        return self._compliance_type is ComplianceType.OPT_IN

    def is_opt_out(self) -> bool:
        return self._compliance_type is ComplianceType.OPT_OUT

    def status(self) -> ConsentStatus | None:
        """Return the recorded status, re-reading the source while it is empty."""
        if self._status is None:
            self._status = self._status_source.read_status()
        return self._status

    def is_answered(self) -> bool:
        """Check whether the visitor answered the banner."""
        return self.status() is not None

    def default_category_value(self) -> bool:
        """Fallback for categories without an explicit override."""
        return self._default_category_value

    def is_allowed_globally(self) -> bool:
        """Evaluate the global (no category) decision.

        info and opt-out allow on "dismiss", opt-in only on "allow".
        "deny" and an unanswered banner never allow.
        """
        status = self.status()
        if self._compliance_type in (ComplianceType.INFO, ComplianceType.OPT_OUT):
            return status is ConsentStatus.DISMISS
        if self._compliance_type is ComplianceType.OPT_IN:
            return status is ConsentStatus.ALLOW
        return False

    def is_allowed(self, category_id: str | None = None) -> bool:
        """Check whether cookies of a category (or cookies at all) may be used.

        Args:
            category_id: Category identifier. If omitted, returns the global decision.

        Returns:
            True if allowed. Always False outside a live request.
        """
        return self.explain(category_id).allowed

    def explain(self, category_id: str | None = None) -> CategoryDecision:
        """Evaluate is_allowed() and report which rule decided it."""
        decision = self._evaluate(category_id)
        if self._decision_logger is not None:
            self._decision_logger.log_decision(
                decision,
                compliance_type=self._compliance_type,
                status=self._status,
            )
        return decision

    def allowed_categories(self) -> list[str]:
        """Identifiers of effective categories that are currently allowed."""
        return [c.id for c in self.registry if self.is_allowed(c.id)]

    def snapshot(self) -> ConsentSnapshot:
        """Evaluate the global decision and every effective category at once.

        Outside a live request every decision in the snapshot is denied,
        the global one included.
        """
        return ConsentSnapshot(
            compliance_type=self._compliance_type,
            status=self.status(),
            answered=self.is_answered(),
            allowed_globally=self.is_allowed(),
            default_category_value=self._default_category_value,
            categories=[self.explain(c.id) for c in self.registry],
        )

    def with_status(self, status: ConsentStatus | str | None) -> ConsentPolicy:
        """Build a new policy sharing this one's configuration and sources.

        The default category value is recomputed for the new status.

        Raises:
            ConfigError: If status is invalid.
        """
        return ConsentPolicy(
            self._compliance_type,
            status=status,
            registry=self.registry,
            status_source=self._status_source,
            override_source=self._override_source,
            request_context=self._request_context,
            decision_logger=self._decision_logger,
        )

    def _evaluate(self, category_id: str | None) -> CategoryDecision:
        if not self._request_context():
            return CategoryDecision(
                category=category_id, allowed=False, reason=DecisionReason.NO_REQUEST_CONTEXT
            )

        if not category_id:
            return CategoryDecision(
                category=None, allowed=self.is_allowed_globally(), reason=DecisionReason.GLOBAL
            )

        if self.registry.is_required(category_id):
            return CategoryDecision(category=category_id, allowed=True, reason=DecisionReason.REQUIRED)

        override = self._override_source.read_override(category_id)
        if override is not None:
            return CategoryDecision(category=category_id, allowed=override, reason=DecisionReason.OVERRIDE)

        return CategoryDecision(
            category=category_id,
            allowed=self._default_category_value,
            reason=DecisionReason.DEFAULT,
        )

    def _calculate_default_category_value(self) -> bool:
        if self.is_answered():
            return self.is_allowed_globally()
        # Unanswered: info/opt-out use cookies until refused, opt-in waits for consent
        return self._compliance_type is not ComplianceType.OPT_IN

    def __repr__(self) -> str:
        status = self._status.value if self._status is not None else None
        return f"ConsentPolicy(compliance_type={self._compliance_type.value!r}, status={status!r})"
