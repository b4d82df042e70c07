"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from timezone_finder.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TZF_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("TZF_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_then_returns_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TZF_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("TZF_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TZF_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("TZF_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("timezone_finder.adapters.api_request_logger.should_log_requests", return_value=False)
    @patch("timezone_finder.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when logging request, then nothing is logged."""
        log_api_request("GET", "http://ip-api.com/json/8.8.8.8", {"fields": "timezone"})

        mock_logger.info.assert_not_called()

    @patch("timezone_finder.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("timezone_finder.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_full_url(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when logging request, then method and full URL are logged."""
        log_api_request(
            "GET",
            "http://ip-api.com/json/8.8.8.8",
            {"fields": "status,message,timezone"},
        )

        mock_logger.info.assert_called_once_with(
            "API Request: GET http://ip-api.com/json/8.8.8.8?fields=status,message,timezone"
        )

    @patch("timezone_finder.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("timezone_finder.adapters.api_request_logger.logger")
    def test_when_url_has_query_then_params_are_appended(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a URL with a query string, when logging, then params are appended with &."""
        log_api_request("GET", "http://geo.example.test/json/1.1.1.1?lang=en", {"fields": "x"})

        mock_logger.info.assert_called_once_with(
            "API Request: GET http://geo.example.test/json/1.1.1.1?lang=en&fields=x"
        )

    @patch("timezone_finder.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("timezone_finder.adapters.api_request_logger.logger")
    def test_when_no_params_then_logs_url_unchanged(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given no params, when logging, then the URL is logged as is."""
        log_api_request("GET", "http://ip-api.com/json/8.8.8.8")

        mock_logger.info.assert_called_once_with("API Request: GET http://ip-api.com/json/8.8.8.8")
