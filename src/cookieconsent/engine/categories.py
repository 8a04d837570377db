"""Cookie categories and the category registry.

The registry merges three inputs into the final set of categories shown in
the settings form:

    built-in categories   session, ads, usagehelper, performance, behavior
  + extra categories      caller-defined, validated at construction
  - disabled categories   hidden from the form (required ones are kept)

Extra categories can be configured either as a list of identifiers:

    ["newsletter", "chat"]

or as a mapping from identifier to a partial definition:

    {
        "newsletter": {"label": "Newsletter", "hint": "Signup tracking."},
        "chat": None,
    }

Missing labels and hints default to the humanized identifier
("social_media" -> "Social Media").

All validation happens in the constructor. A registry that was built
successfully never raises afterwards.
"""

from __future__ import annotations

__all__ = [
    "Category",
    "CategoryDefinition",
    "CategoryRegistry",
    "ExtraCategories",
    "humanize",
    "normalize_disabled_categories",
    "normalize_extra_categories",
]

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from cookieconsent.constants import (
    BUILTIN_CATEGORY_TEXTS,
    CATEGORIES,
    CATEGORIES_REQUIRED,
)
from cookieconsent.exceptions import ConfigError
from cookieconsent.telemetry.system_logger import get_system_logger

# ASCII word characters only, the identifier is embedded in cookie names
_IDENTIFIER_PATTERN = re.compile(r"\w+", re.ASCII)


class CategoryDefinition(BaseModel):
    """Partial definition of an extra category as written in configuration.

    Attributes:
        label: Human-readable name. Defaults to the humanized identifier.
        hint: Description shown in the settings form. Defaults to the
            humanized identifier.
    """

    label: str | None = None
    hint: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class Category(BaseModel):
    """A normalized cookie category.

    Attributes:
        id: Identifier, also used in the per-category cookie name.
        label: Human-readable name.
        hint: Description shown in the settings form.
        required: Always allowed, cannot be disabled.
        builtin: Shipped with the package (not an extra category).
    """

    id: str
    label: str
    hint: str
    required: bool = False
    builtin: bool = False

    model_config = ConfigDict(frozen=True)


# Either ["a", "b"] or {"a": {...}, "b": None}
ExtraCategories = Sequence[str] | Mapping[str, CategoryDefinition | Mapping[str, Any] | None]


def humanize(identifier: str) -> str:
    """Convert an identifier to a human-readable label.

    Drops a trailing "_id", turns underscores into spaces and capitalizes
    every word. camelCase is not split, so labels match the ones the
    front-end generates.

    Example:
        >>> humanize("social_media")
        'Social Media'
        >>> humanize("liveChat")
        'LiveChat'
    """
    text = re.sub(r"_id$", "", identifier).replace("_", " ")
    words = [word[:1].upper() + word[1:] for word in text.split()]
    return " ".join(words) or identifier


def _iter_extra_entries(
    extra_categories: ExtraCategories,
) -> Iterator[tuple[Any, Any]]:
    """Yield (identifier, payload) pairs from either supported input shape."""
    if isinstance(extra_categories, Mapping):
        yield from extra_categories.items()
        return

    if isinstance(extra_categories, (str, bytes)):
        raise ConfigError(
            "extra_categories must be a list of identifiers or a mapping, not a string.",
            field="extra_categories",
        )

    for identifier in extra_categories:
        yield identifier, None


def _to_definition(identifier: str, payload: Any) -> CategoryDefinition:
    """Validate a raw payload into a CategoryDefinition.

    Raises:
        ConfigError: If the payload sets "id", has unknown keys or wrong types.
    """
    if payload is None:
        return CategoryDefinition()
    if isinstance(payload, CategoryDefinition):
        return payload
    if not isinstance(payload, Mapping):
        raise ConfigError(
            f'Definition of extra category "{identifier}" must be a mapping with '
            f"optional label and hint, got {type(payload).__name__}.",
            field="extra_categories",
        )

    if "id" in payload:
        raise ConfigError(
            'Do not set "id" for extra category items, the key is the identifier.',
            field="extra_categories",
        )

    try:
        return CategoryDefinition.model_validate(dict(payload))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(
            f'Invalid definition for extra category "{identifier}": {details}',
            field="extra_categories",
        ) from e


def normalize_extra_categories(extra_categories: ExtraCategories) -> list[Category]:
    """Validate extra category definitions and fill in defaults.

    Args:
        extra_categories: List of identifiers or mapping of identifier to
            partial definition.

    Returns:
        Normalized categories in input order.

    Raises:
        ConfigError: If an identifier collides with a built-in category, a
            definition sets "id", an identifier contains non-word characters
            or an identifier is repeated.
    """
    normalized: list[Category] = []
    seen: set[str] = set()

    for identifier, payload in _iter_extra_entries(extra_categories):
        if not isinstance(identifier, str):
            raise ConfigError(
                f"Extra category identifiers must be strings, got {identifier!r}.",
                field="extra_categories",
            )

        if identifier in CATEGORIES:
            raise ConfigError(
                f'You cannot use "{identifier}" default category in extra categories.',
                field="extra_categories",
            )

        definition = _to_definition(identifier, payload)

        if not _IDENTIFIER_PATTERN.fullmatch(identifier):
            raise ConfigError(
                f'Category names must contain only word characters, got "{identifier}".',
                field="extra_categories",
            )

        if identifier in seen:
            raise ConfigError(
                f'Duplicate extra category "{identifier}".',
                field="extra_categories",
            )
        seen.add(identifier)

        default_text = humanize(identifier)
        normalized.append(
            Category(
                id=identifier,
                label=definition.label if definition.label is not None else default_text,
                hint=definition.hint if definition.hint is not None else default_text,
            )
        )

    return normalized


def normalize_disabled_categories(disabled_categories: Iterable[str]) -> frozenset[str]:
    """Drop required categories from the disabled list.

    Required categories cannot be disabled; listing them is ignored with a
    warning instead of failing, so shared configs keep working.
    """
    if isinstance(disabled_categories, (str, bytes)):
        raise ConfigError(
            "disabled_categories must be a list of identifiers, not a string.",
            field="disabled_categories",
        )

    disabled = frozenset(disabled_categories)
    ignored = disabled & CATEGORIES_REQUIRED
    if ignored:
        get_system_logger().warning(
            {
                "event": "required_categories_not_disabled",
                "message": f"Ignoring required categories in disabled list: {', '.join(sorted(ignored))}",
                "categories": sorted(ignored),
            }
        )
    return disabled - CATEGORIES_REQUIRED


def _builtin_categories() -> list[Category]:
    categories = []
    for category_id in CATEGORIES:
        label, hint = BUILTIN_CATEGORY_TEXTS[category_id]
        categories.append(
            Category(
                id=category_id,
                label=label,
                hint=hint,
                required=category_id in CATEGORIES_REQUIRED,
                builtin=True,
            )
        )
    return categories


class CategoryRegistry:
    """Final, ordered set of cookie categories.

    Built-in categories come first in their fixed order, followed by extra
    categories in configuration order. Disabled categories are removed,
    except required ones which are always present.

    Attributes:
        extra_categories: Normalized extra categories.
        disabled_categories: Effective disabled set (never contains required ones).
    """

    def __init__(
        self,
        extra_categories: ExtraCategories | None = None,
        disabled_categories: Iterable[str] | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            extra_categories: Caller-defined categories (list or mapping).
            disabled_categories: Category identifiers to hide.

        Raises:
            ConfigError: If extra categories are invalid.
        """
        self.extra_categories: tuple[Category, ...] = tuple(
            normalize_extra_categories(extra_categories or ())
        )
        self.disabled_categories: frozenset[str] = normalize_disabled_categories(
            disabled_categories or ()
        )

        merged = [*_builtin_categories(), *self.extra_categories]
        self._by_id: dict[str, Category] = {c.id: c for c in merged}
        self._effective: tuple[Category, ...] = tuple(
            c for c in merged if c.id not in self.disabled_categories
        )

    @classmethod
    def normalize(
        cls,
        extra_categories: ExtraCategories | None = None,
        disabled_categories: Iterable[str] | None = None,
    ) -> list[Category]:
        """Validate the inputs and return the effective categories.

        Raises:
            ConfigError: If extra categories are invalid.
        """
        return cls(extra_categories, disabled_categories).effective_categories()

    @staticmethod
    def is_required(category_id: str) -> bool:
        """Check whether a category is always allowed (session, usagehelper)."""
        return category_id in CATEGORIES_REQUIRED

    @property
    def required_categories(self) -> frozenset[str]:
        return CATEGORIES_REQUIRED

    @property
    def category_ids(self) -> list[str]:
        """Identifiers of the effective categories, in display order."""
        return [c.id for c in self._effective]

    def effective_categories(self) -> list[Category]:
        """Built-in and extra categories minus the disabled ones."""
        return list(self._effective)

    def get(self, category_id: str) -> Category | None:
        """Look up a known category (including disabled ones) by identifier."""
        return self._by_id.get(category_id)

    def __contains__(self, category_id: object) -> bool:
        return any(c.id == category_id for c in self._effective)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._effective)

    def __len__(self) -> int:
        return len(self._effective)

    def __repr__(self) -> str:
        return f"CategoryRegistry(categories={self.category_ids!r})"
