"""Unit tests for consent sources (cookie parsing)."""

from unittest.mock import patch

import pytest

from cookieconsent.engine import (
    ConsentStatus,
    CookieSource,
    OverrideSource,
    StatusSource,
    parse_cookie_bool,
)


class TestParseCookieBool:
    """Tests for boolean-like cookie values."""

    @pytest.mark.parametrize("value", ["true", "TRUE", " 1 ", "yes", "on", True, 1])
    def test_truthy(self, value) -> None:
        assert parse_cookie_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "off", "", False, 0])
    def test_falsy(self, value) -> None:
        assert parse_cookie_bool(value) is False

    @pytest.mark.parametrize("value", ["maybe", "2", None, 2, 1.0, ["true"]])
    def test_unparseable(self, value) -> None:
        assert parse_cookie_bool(value) is None


class TestCookieSource:
    """Tests for CookieSource."""

    def test_implements_both_protocols(self) -> None:
        # Act
        source = CookieSource()

        # Assert
        assert isinstance(source, StatusSource)
        assert isinstance(source, OverrideSource)

    @pytest.mark.parametrize("value", ["deny", "dismiss", "allow"])
    def test_reads_status(self, value: str) -> None:
        """Given a valid status cookie, returns the status."""
        # Act
        source = CookieSource({"cookieconsent_status": value})

        # Assert
        assert source.read_status() is ConsentStatus(value)

    @pytest.mark.parametrize("cookies", [{}, {"cookieconsent_status": ""}, {"other": "allow"}])
    def test_missing_status(self, cookies: dict) -> None:
        """Given no status cookie, returns None."""
        assert CookieSource(cookies).read_status() is None

    def test_invalid_status_is_unanswered_and_logged(self) -> None:
        """Given an unrecognized status value, returns None and warns."""
        # Arrange
        source = CookieSource({"cookieconsent_status": "accepted"})

        # Act
        with patch("cookieconsent.engine.sources.get_system_logger") as mock_logger:
            status = source.read_status()

        # Assert
        assert status is None
        warning = mock_logger.return_value.warning.call_args.args[0]
        assert warning["event"] == "invalid_status_cookie"
        assert warning["value"] == "accepted"

    def test_reads_override_by_prefix(self) -> None:
        """Given option cookies, returns the parsed per-category value."""
        # Arrange
        source = CookieSource(
            {
                "cookieconsent_option_ads": "false",
                "cookieconsent_option_newsletter": "true",
            }
        )

        # Act & Assert
        assert source.read_override("ads") is False
        assert source.read_override("newsletter") is True
        assert source.read_override("performance") is None

    def test_invalid_override_is_absent_and_logged(self) -> None:
        """Given a non-boolean option cookie, returns None and warns."""
        # Arrange
        source = CookieSource({"cookieconsent_option_ads": "sometimes"})

        # Act
        with patch("cookieconsent.engine.sources.get_system_logger") as mock_logger:
            value = source.read_override("ads")

        # Assert
        assert value is None
        warning = mock_logger.return_value.warning.call_args.args[0]
        assert warning["cookie"] == "cookieconsent_option_ads"
