"""Shared dependencies for FastAPI routes.

The application stores its ConsentConfig on app.state at startup; each
request then gets its own ConsentPolicy built from request.cookies.

Usage with Annotated (recommended):
    from cookieconsent.api.deps import ConsentPolicyDep

    app.state.consent_config = ConsentConfig.load_from_file(path)

    @app.get("/")
    async def index(policy: ConsentPolicyDep) -> dict:
        return {"ads": policy.is_allowed("ads")}
"""

from __future__ import annotations

__all__ = [
    # Dependency functions
    "get_consent_config",
    "get_consent_policy",
    "get_decision_logger",
    # Type aliases for Annotated pattern
    "ConsentConfigDep",
    "ConsentPolicyDep",
]

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from cookieconsent.config import ConsentConfig
from cookieconsent.engine.policy import ConsentPolicy
from cookieconsent.engine.sources import always_live
from cookieconsent.telemetry.decision_logger import DecisionEventLogger


def get_consent_config(request: Request) -> ConsentConfig:
    """Get ConsentConfig from app.state.

    Raises:
        HTTPException: 503 if the application did not configure consent.
    """
    config = getattr(request.app.state, "consent_config", None)
    if config is None:
        raise HTTPException(status_code=503, detail="Cookie consent is not configured.")
    return config


def get_decision_logger(request: Request) -> DecisionEventLogger | None:
    """Get the optional DecisionEventLogger from app.state."""
    return getattr(request.app.state, "consent_decision_logger", None)


ConsentConfigDep = Annotated[ConsentConfig, Depends(get_consent_config)]


def get_consent_policy(
    request: Request,
    config: ConsentConfigDep,
    decision_logger: Annotated[DecisionEventLogger | None, Depends(get_decision_logger)],
) -> ConsentPolicy:
    """Build a ConsentPolicy for the current request.

    A new policy is built per request, so cached status never leaks
    between visitors.
    """
    return config.build_policy(
        cookies=request.cookies,
        request_context=always_live,
        decision_logger=decision_logger,
    )


ConsentPolicyDep = Annotated[ConsentPolicy, Depends(get_consent_policy)]
