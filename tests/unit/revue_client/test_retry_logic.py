"""Unit tests for revue_client.retry_logic module."""

import pytest
from unittest.mock import patch, MagicMock

from src.revue_client.retry_logic import retry_on_rate_limit, as_decorator, _is_rate_limit_error
from src.revue_client.errors import APIAccessError, APIUnreachableError, RateLimitedError


class TestIsRateLimitError:
    """Test cases for _is_rate_limit_error function."""

    def test_detects_rate_limited_error(self):
        assert _is_rate_limit_error(RateLimitedError("https://revue.test")) is True

    def test_detects_status_code_attribute(self):
        error = Exception("API error")
        error.status_code = 429
        assert _is_rate_limit_error(error) is True

    def test_detects_response_status_code_attribute(self):
        error = Exception("API error")
        error.response = MagicMock()
        error.response.status_code = 429
        assert _is_rate_limit_error(error) is True

    def test_returns_false_for_other_errors(self):
        assert _is_rate_limit_error(Exception("Something went wrong")) is False
        assert _is_rate_limit_error(APIUnreachableError("https://revue.test")) is False

    def test_returns_false_for_other_status_codes(self):
        error = Exception("Bad request")
        error.status_code = 400
        assert _is_rate_limit_error(error) is False


class TestRetryOnRateLimit:
    """Test cases for retry_on_rate_limit function."""

    def test_success_on_first_attempt(self):
        mock_func = MagicMock(return_value="success")
        result = retry_on_rate_limit(mock_func, "arg1", kwarg1="value1")

        assert result == "success"
        mock_func.assert_called_once_with("arg1", kwarg1="value1")

    @patch('src.revue_client.retry_logic.time.sleep')
    def test_retries_then_succeeds(self, mock_sleep):
        mock_func = MagicMock(side_effect=[
            RateLimitedError("https://revue.test"),
            RateLimitedError("https://revue.test"),
            "success",
        ])

        result = retry_on_rate_limit(mock_func)

        assert result == "success"
        assert mock_func.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2]

    @patch('src.revue_client.retry_logic.time.sleep')
    def test_gives_up_after_three_retries(self, mock_sleep):
        mock_func = MagicMock(side_effect=RateLimitedError("https://revue.test"))

        with pytest.raises(APIAccessError):
            retry_on_rate_limit(mock_func)

        assert mock_func.call_count == 4
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2, 4]

    @patch('src.revue_client.retry_logic.time.sleep')
    def test_fails_fast_on_other_errors(self, mock_sleep):
        mock_func = MagicMock(side_effect=APIUnreachableError("https://revue.test"))

        with pytest.raises(APIUnreachableError):
            retry_on_rate_limit(mock_func)

        mock_func.assert_called_once()
        mock_sleep.assert_not_called()


class TestAsDecorator:

    @patch('src.revue_client.retry_logic.time.sleep')
    def test_decorated_function_retries(self, mock_sleep):
        calls = []

        @as_decorator
        def flaky(value):
            calls.append(value)
            if len(calls) == 1:
                raise RateLimitedError("https://revue.test")
            return value * 2

        assert flaky(21) == 42
        assert calls == [21, 21]
        assert flaky.__name__ == "flaky"
