"""Read-only sources of consent data.

The policy never looks at cookies directly. It receives two lookups:

- StatusSource: the recorded banner answer (`cookieconsent_status`)
- OverrideSource: per-category choices (`cookieconsent_option_<id>`)

External integrations implement these protocols structurally, without
inheriting from our code. CookieSource implements both on top of an
already-parsed cookie mapping (e.g. Starlette's request.cookies).
"""

from __future__ import annotations

__all__ = [
    "CookieSource",
    "OverrideSource",
    "RequestContextPredicate",
    "StatusSource",
    "always_live",
    "never_live",
    "parse_cookie_bool",
]

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from cookieconsent.constants import (
    COOKIE_OPTION_PREFIX,
    FALSY_COOKIE_VALUES,
    STATUS_COOKIE_NAME,
    TRUTHY_COOKIE_VALUES,
)
from cookieconsent.engine.status import ConsentStatus
from cookieconsent.telemetry.system_logger import get_system_logger

# "Is this a live, servable request?" Gates ConsentPolicy.is_allowed().
RequestContextPredicate = Callable[[], bool]


def always_live() -> bool:
    """Request-context predicate for web handlers."""
    return True


def never_live() -> bool:
    """Request-context predicate for code running outside a request."""
    return False


@runtime_checkable
class StatusSource(Protocol):
    """Source of the recorded consent status."""

    def read_status(self) -> ConsentStatus | None:
        """Return the recorded status, or None if the banner is unanswered."""
        ...


@runtime_checkable
class OverrideSource(Protocol):
    """Source of explicit per-category choices."""

    def read_override(self, category_id: str) -> bool | None:
        """Return the visitor's choice for a category, or None if absent."""
        ...


def parse_cookie_bool(value: Any) -> bool | None:
    """Interpret a boolean-like cookie value.

    Accepts real booleans and the strings true/false, 1/0, yes/no, on/off
    (case-insensitive, surrounding whitespace ignored).

    Returns:
        The parsed boolean, or None if the value is not boolean-like.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0 if value in (0, 1) else None
    if not isinstance(value, str):
        return None

    normalized = value.strip().lower()
    if normalized in TRUTHY_COOKIE_VALUES:
        return True
    if normalized in FALSY_COOKIE_VALUES:
        return False
    return None


class CookieSource:
    """StatusSource and OverrideSource backed by a cookie mapping.

    Malformed values are treated as missing and logged as warnings, so a
    tampered cookie falls back to the policy defaults instead of failing
    the request.
    """

    def __init__(self, cookies: Mapping[str, Any] | None = None) -> None:
        """Initialize from a parsed cookie mapping.

        Args:
            cookies: Cookie name to value. None means no cookies.
        """
        self._cookies: Mapping[str, Any] = cookies if cookies is not None else {}

    def read_status(self) -> ConsentStatus | None:
        raw = self._cookies.get(STATUS_COOKIE_NAME)
        if not raw:
            return None
        try:
            return ConsentStatus(raw)
        except ValueError:
            get_system_logger().warning(
                {
                    "event": "invalid_status_cookie",
                    "message": f"Ignoring unrecognized {STATUS_COOKIE_NAME} value {raw!r}",
                    "cookie": STATUS_COOKIE_NAME,
                    "value": str(raw),
                }
            )
            return None

    def read_override(self, category_id: str) -> bool | None:
        cookie_name = f"{COOKIE_OPTION_PREFIX}{category_id}"
        if cookie_name not in self._cookies:
            return None

        raw = self._cookies[cookie_name]
        parsed = parse_cookie_bool(raw)
        if parsed is None:
            get_system_logger().warning(
                {
                    "event": "invalid_option_cookie",
                    "message": f"Ignoring non-boolean {cookie_name} value {raw!r}",
                    "cookie": cookie_name,
                    "value": str(raw),
                }
            )
        return parsed

    def __repr__(self) -> str:
        return f"CookieSource(cookies={sorted(self._cookies)!r})"
