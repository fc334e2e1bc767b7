"""Tests for the bus error handling decorator."""

import logging

import pytest

from ltc2946.domain.exceptions import BusError
from ltc2946.infrastructure.decorators.error_handler import handle_bus_errors


class TestHandleBusErrors:
    """Test error handling decorator."""

    def test_successful_execution(self):
        @handle_bus_errors("test operation")
        def test_func():
            return b"\x01"

        assert test_func() == b"\x01"

    def test_os_error_becomes_bus_error(self):
        """Test OSError is converted and chained."""

        @handle_bus_errors("I2C block read")
        def test_func():
            raise OSError(121, "Remote I/O error")

        with pytest.raises(BusError, match="I2C block read failed") as exc_info:
            test_func()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_bus_error_reraised_unchanged(self):
        original = BusError("NACK")

        @handle_bus_errors("test operation")
        def test_func():
            raise original

        with pytest.raises(BusError) as exc_info:
            test_func()
        assert exc_info.value is original

    def test_unexpected_error_logged_and_reraised(self, caplog):
        """Test other exceptions are never swallowed."""

        @handle_bus_errors("test operation")
        def test_func():
            raise ValueError("test error")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError, match="test error"):
                test_func()

        assert "test operation unexpected error" in caplog.text
        assert "test error" in caplog.text

    def test_custom_logger(self, caplog):
        custom_logger = logging.getLogger("custom")

        @handle_bus_errors("test op", logger=custom_logger)
        def test_func():
            raise OSError("io")

        with caplog.at_level(logging.ERROR, logger="custom"):
            with pytest.raises(BusError):
                test_func()

        assert any(r.name == "custom" for r in caplog.records)
        assert "test op I/O error" in caplog.text
