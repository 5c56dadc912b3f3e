"""Unit tests for logging helpers."""

import logging

import pytest

from songtags.helpers.logging_helper import configure_logging, sanitize_exception_message


class TestConfigureLogging:
    """Test root logger setup."""

    @pytest.fixture(autouse=True)
    def _restore_root_handlers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        yield
        root.handlers[:] = handlers

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("loud", logging.INFO)],
    )
    def test_sets_root_level(self, level, expected: int) -> None:
        """Names are case-insensitive; unknown names fall back to INFO."""
        configure_logging(level)
        assert logging.getLogger().level == expected


class TestSanitizeExceptionMessage:
    """Test user-safe error messages."""

    @pytest.mark.unit
    def test_returns_safe_message_and_logs_details(self, caplog: pytest.LogCaptureFixture) -> None:
        """The raw error goes to the log only."""
        try:
            raise OSError("/secret/path not readable")
        except OSError as e:
            with caplog.at_level(logging.ERROR):
                message = sanitize_exception_message(e, "Read failed")

        assert message == "Read failed"
        assert "/secret/path" not in message
        assert "/secret/path" in caplog.text
