"""Tests for SMBusTransport."""

from unittest.mock import MagicMock, patch

import pytest

from ltc2946.domain.exceptions import BusError
from ltc2946.infrastructure.transport.smbus_transport import SMBusTransport

SMBUS_PATH = "ltc2946.infrastructure.transport.smbus_transport.SMBus"


@pytest.fixture
def mock_smbus():
    """Patch smbus2.SMBus with a mock instance."""
    with patch(SMBUS_PATH) as smbus_cls:
        instance = MagicMock()
        smbus_cls.return_value = instance
        yield smbus_cls, instance


class TestSMBusTransport:
    """Test suite for SMBusTransport."""

    def test_opens_lazily(self, mock_smbus):
        smbus_cls, _ = mock_smbus
        SMBusTransport(bus_number=3, device_address=0x67)
        smbus_cls.assert_not_called()

    def test_read_block(self, mock_smbus):
        smbus_cls, instance = mock_smbus
        instance.read_i2c_block_data.return_value = [0x3E, 0x80]

        transport = SMBusTransport(bus_number=3, device_address=0x67)
        data = transport.read_block(0x14, 2)

        assert data == b"\x3e\x80"
        smbus_cls.assert_called_once_with(3)
        instance.read_i2c_block_data.assert_called_once_with(0x67, 0x14, 2)

    def test_write_block(self, mock_smbus):
        _, instance = mock_smbus
        transport = SMBusTransport(device_address=0x6A)

        transport.write_block(0x08, b"\x00\x00\x20")

        instance.write_i2c_block_data.assert_called_once_with(
            0x6A, 0x08, [0x00, 0x00, 0x20]
        )

    def test_handle_reused(self, mock_smbus):
        smbus_cls, instance = mock_smbus
        instance.read_i2c_block_data.return_value = [0, 0]
        transport = SMBusTransport()

        transport.read_block(0x14, 2)
        transport.read_block(0x16, 2)

        smbus_cls.assert_called_once()

    def test_os_error_becomes_bus_error(self, mock_smbus):
        _, instance = mock_smbus
        instance.read_i2c_block_data.side_effect = OSError(121, "Remote I/O error")

        with pytest.raises(BusError) as exc_info:
            SMBusTransport().read_block(0x05, 3)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_open_failure_becomes_bus_error(self, mock_smbus):
        smbus_cls, _ = mock_smbus
        smbus_cls.side_effect = FileNotFoundError("/dev/i2c-9")

        with pytest.raises(BusError):
            SMBusTransport(bus_number=9).write_block(0x00, b"\x08")

    def test_short_read_raises(self, mock_smbus):
        _, instance = mock_smbus
        instance.read_i2c_block_data.return_value = [0x01]

        with pytest.raises(BusError, match="Short read"):
            SMBusTransport().read_block(0x05, 3)

    def test_close(self, mock_smbus):
        _, instance = mock_smbus
        instance.read_i2c_block_data.return_value = [0, 0]
        transport = SMBusTransport()
        transport.read_block(0x14, 2)

        transport.close()
        transport.close()

        instance.close.assert_called_once()

    def test_invalid_device_address(self):
        with pytest.raises(ValueError, match="Invalid I2C address"):
            SMBusTransport(device_address=0x80)
