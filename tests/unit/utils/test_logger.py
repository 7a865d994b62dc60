"""Test logging helpers."""

import logging
from unittest.mock import patch

from comedy_club.utils.logger import (
    get_logger,
    log_cache_write,
    log_error,
    log_joke_served,
    setup_logging,
)


class TestSetupLogging:
    """Test logging setup."""

    def test_should_return_usable_logger(self):
        """Test configured logger accepts key/value events."""
        setup_logging("DEBUG")
        logger = get_logger("test")

        logger.info("event", answer=42)

    def test_should_accept_lowercase_level(self):
        """Test level names are case-insensitive."""
        with patch("comedy_club.utils.logger.logging.basicConfig") as mock_basic:
            setup_logging("warning")

        assert mock_basic.call_args[1]["level"] == logging.WARNING


class TestLogHelpers:
    """Test event helpers."""

    def test_should_log_served_joke(self):
        """Test served joke event."""
        with patch("comedy_club.utils.logger.get_logger") as mock_get:
            log_joke_served("abc", 3)

        mock_get.return_value.info.assert_called_once_with(
            "joke_served", joke_id="abc", times_displayed=3
        )

    def test_should_log_cache_write_at_debug(self):
        """Test cache write event."""
        with patch("comedy_club.utils.logger.get_logger") as mock_get:
            log_cache_write("joke:abc", 300)

        mock_get.return_value.debug.assert_called_once_with(
            "cache_write", key="joke:abc", ttl_seconds=300
        )

    def test_should_log_error_type(self):
        """Test error event carries the exception type."""
        with patch("comedy_club.utils.logger.get_logger") as mock_get:
            log_error(ValueError("bad"), "cache_snapshot", joke_id="abc")

        _, kwargs = mock_get.return_value.error.call_args
        assert kwargs["error_type"] == "ValueError"
        assert kwargs["context"] == "cache_snapshot"
        assert kwargs["joke_id"] == "abc"
