"""Shared file utilities for cookieconsent.

Provides JSON loading with Pydantic validation and consistent error
messages for configuration files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from cookieconsent.exceptions import ConfigError

# Type variable for Pydantic models
T = TypeVar("T", bound=BaseModel)

__all__ = [
    "format_validation_error",
    "load_validated_json",
    "require_file_exists",
]


def require_file_exists(file_path: Path, file_type: str = "file") -> None:
    """Raise FileNotFoundError with helpful message if file doesn't exist.

    Args:
        file_path: Path to check.
        file_type: Description for error message (e.g., "configuration").

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if file_path.exists():
        return
    raise FileNotFoundError(f"{file_type.capitalize()} file not found at {file_path}.")


def format_validation_error(error: ValidationError) -> list[str]:
    """Render pydantic errors as "  - location: message" lines."""
    lines = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) or "(root)"
        msg = err["msg"]
        # Errors raised inside validators are prefixed by pydantic
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        lines.append(f"  - {loc}: {msg}")
    return lines


def load_validated_json(
    file_path: Path,
    model_class: type[T],
    file_type: str = "file",
    encoding: str | None = "utf-8",
) -> T:
    """Load JSON file and validate against Pydantic model.

    Args:
        file_path: Path to JSON file.
        model_class: Pydantic model class to validate against.
        file_type: Description for error messages (e.g., "config").
        encoding: File encoding.

    Returns:
        Validated Pydantic model instance.

    Raises:
        ConfigError: If the file cannot be read, JSON is invalid or validation fails.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {file_type} file {file_path}: {e}") from e

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid {file_type} in {file_path}:\n" + "\n".join(format_validation_error(e))
        ) from e
