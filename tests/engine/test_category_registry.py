"""Unit tests for CategoryRegistry and extra category normalization."""

import pytest

from cookieconsent.engine import Category, CategoryDefinition, CategoryRegistry, humanize
from cookieconsent.exceptions import ConfigError

BUILTIN_IDS = ["session", "ads", "usagehelper", "performance", "behavior"]


# ============================================================================
# humanize
# ============================================================================


class TestHumanize:
    """Tests for identifier humanization."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("newsletter", "Newsletter"),
            ("liveChat", "LiveChat"),
            ("social_media", "Social Media"),
            ("partner_id", "Partner"),
            ("abTest2", "AbTest2"),
        ],
    )
    def test_humanize(self, identifier: str, expected: str) -> None:
        assert humanize(identifier) == expected

    def test_falls_back_to_identifier(self) -> None:
        """Given an identifier without words, returns it unchanged."""
        assert humanize("_") == "_"


# ============================================================================
# Built-in categories
# ============================================================================


class TestBuiltinCategories:
    """Tests for the registry without extra configuration."""

    def test_builtin_order(self) -> None:
        """Given no configuration, lists built-in categories in fixed order."""
        # Act
        registry = CategoryRegistry()

        # Assert
        assert registry.category_ids == BUILTIN_IDS
        assert len(registry) == 5

    def test_required_flags(self) -> None:
        """session and usagehelper are flagged required, others are not."""
        # Act
        registry = CategoryRegistry()

        # Assert
        required = {c.id for c in registry if c.required}
        assert required == {"session", "usagehelper"}
        assert all(c.builtin for c in registry)

    @pytest.mark.parametrize(
        "category_id,expected",
        [
            ("session", True),
            ("usagehelper", True),
            ("ads", False),
            ("performance", False),
            ("newsletter", False),
        ],
    )
    def test_is_required(self, category_id: str, expected: bool) -> None:
        assert CategoryRegistry.is_required(category_id) is expected


# ============================================================================
# Extra categories
# ============================================================================


class TestExtraCategories:
    """Tests for extra category normalization."""

    def test_list_of_identifiers(self) -> None:
        """Given bare identifiers, label and hint default to the humanized id."""
        # Act
        registry = CategoryRegistry(["newsletter", "liveChat"])

        # Assert
        assert registry.category_ids == [*BUILTIN_IDS, "newsletter", "liveChat"]
        assert registry.get("liveChat") == Category(id="liveChat", label="LiveChat", hint="LiveChat")

    def test_mapping_with_partial_definitions(self) -> None:
        """Given a mapping, missing fields default and given ones are kept."""
        # Act
        registry = CategoryRegistry(
            {
                "newsletter": {"label": "Newsletter signup", "hint": "Tracks signups."},
                "chat": {"label": "Support chat"},
                "maps": None,
                "video": CategoryDefinition(hint="Embedded players."),
            }
        )

        # Assert
        assert registry.get("newsletter").label == "Newsletter signup"
        assert registry.get("newsletter").hint == "Tracks signups."
        assert registry.get("chat").hint == "Chat"
        assert registry.get("maps").label == "Maps"
        assert registry.get("video").label == "Video"
        assert registry.get("video").hint == "Embedded players."
        assert not registry.get("video").required

    @pytest.mark.parametrize("identifier", BUILTIN_IDS)
    def test_rejects_builtin_collision(self, identifier: str) -> None:
        """Given an extra category named like a built-in, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="default category"):
            CategoryRegistry([identifier])

    def test_rejects_builtin_collision_in_mapping(self) -> None:
        """Given a mapping key named like a built-in, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match='"ads"'):
            CategoryRegistry({"ads": {"label": "My ads"}})

    @pytest.mark.parametrize("identifier", ["my-cat", "my cat", "café", "a.b", ""])
    def test_rejects_non_word_identifiers(self, identifier: str) -> None:
        """Given non-word characters, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="word characters"):
            CategoryRegistry([identifier])

    def test_rejects_id_field(self) -> None:
        """Given a definition with an "id" field, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match='"id"'):
            CategoryRegistry({"newsletter": {"id": "newsletter", "label": "Newsletter"}})

    def test_rejects_unknown_fields(self) -> None:
        """Given a definition with unknown keys, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="newsletter"):
            CategoryRegistry({"newsletter": {"title": "Newsletter"}})

    def test_rejects_non_mapping_definition(self) -> None:
        """Given a definition that is not a mapping, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="must be a mapping"):
            CategoryRegistry({"newsletter": "Newsletter"})

    def test_rejects_duplicates(self) -> None:
        """Given the same identifier twice, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="Duplicate"):
            CategoryRegistry(["newsletter", "newsletter"])

    def test_rejects_plain_string(self) -> None:
        """Given a string instead of a list, raises ConfigError."""
        # Act & Assert
        with pytest.raises(ConfigError, match="not a string"):
            CategoryRegistry("newsletter")

    def test_error_names_field(self) -> None:
        """ConfigError carries the offending setting name."""
        # Act
        with pytest.raises(ConfigError) as exc_info:
            CategoryRegistry(["my-cat"])

        # Assert
        assert exc_info.value.field == "extra_categories"


# ============================================================================
# Disabled categories
# ============================================================================


class TestDisabledCategories:
    """Tests for disabled category handling."""

    def test_disabled_categories_are_hidden(self) -> None:
        """Given disabled categories, they are not effective."""
        # Act
        registry = CategoryRegistry(["newsletter"], ["behavior", "newsletter"])

        # Assert
        assert registry.category_ids == ["session", "ads", "usagehelper", "performance"]
        assert "behavior" not in registry
        assert registry.get("behavior") is not None

    def test_required_categories_cannot_be_disabled(self) -> None:
        """Given session/usagehelper in the disabled list, they stay effective."""
        # Act
        registry = CategoryRegistry(disabled_categories=["session", "usagehelper", "ads"])

        # Assert
        assert registry.category_ids == ["session", "usagehelper", "performance", "behavior"]
        assert registry.disabled_categories == frozenset({"ads"})

    def test_unknown_disabled_categories_are_ignored(self) -> None:
        """Given an unknown disabled id, the effective set is unchanged."""
        # Act
        registry = CategoryRegistry(disabled_categories=["nonexistent"])

        # Assert
        assert registry.category_ids == BUILTIN_IDS

    @pytest.mark.parametrize(
        "disabled",
        [
            ["ads"],
            ["session", "behavior"],
            ["usagehelper", "performance", "newsletter"],
            BUILTIN_IDS,
        ],
    )
    def test_effective_never_contains_disabled_non_required(self, disabled: list[str]) -> None:
        """Effective categories exclude every disabled non-required category."""
        # Act
        effective = CategoryRegistry.normalize(["newsletter"], disabled)

        # Assert
        ids = {c.id for c in effective}
        assert {"session", "usagehelper"} <= ids
        assert not ids & (set(disabled) - {"session", "usagehelper"})
