"""Logging for cookieconsent.

- system_logger: operational warnings (malformed cookies, ignored settings)
- decision_logger: structured consent decision events

Import directly from submodules to avoid circular imports:
    from cookieconsent.telemetry.system_logger import get_system_logger
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
