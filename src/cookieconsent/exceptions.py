"""Custom exceptions for cookieconsent.

All configuration problems are detected when the registry, policy or config
model is constructed. Query operations (is_allowed, is_answered, ...) never
raise: missing cookies are a normal "unanswered" or "no override" case.

Usage:
    from cookieconsent.exceptions import ConfigError
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "CookieConsentError",
]


class CookieConsentError(Exception):
    """Base exception for all cookieconsent errors."""


class ConfigError(CookieConsentError, ValueError):
    """Invalid consent configuration.

    Raised when:
    - The compliance type is not one of info, opt-in, opt-out
    - A caller-supplied consent status is not one of deny, dismiss, allow
    - An extra category collides with a built-in category
    - An extra category definition sets an "id" field
    - An extra category identifier contains non-word characters
    - A configuration file cannot be read or fails validation

    This is a bootstrap error. It is meant to surface during application
    startup or tests, never while serving a request.

    Attributes:
        field: Name of the offending setting, if known.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message
