"""SMBus transport implementation using smbus2.

Implements IBus over a Linux I2C adapter with SMBus block transfers.
"""

from __future__ import annotations

import logging

from smbus2 import SMBus

from ...const import DEFAULT_BUS_NUMBER, DEFAULT_DEVICE_ADDRESS
from ...domain.exceptions import BusError
from ...domain.helpers.validators import validate_register_address
from ...domain.interfaces import IBus
from ..decorators.error_handler import handle_bus_errors

_LOGGER = logging.getLogger(__name__)


class SMBusTransport(IBus):
    """I2C block transport for one device on one adapter.

    The SMBus handle is opened lazily on the first transaction and owned
    exclusively by this transport until close().

    Attributes:
        bus_number: Linux I2C adapter number (/dev/i2c-N)
        device_address: 7-bit device address

    Example:
        >>> transport = SMBusTransport(bus_number=1, device_address=0x67)  # doctest: +SKIP
        >>> transport.read_block(0x28, 2)  # doctest: +SKIP
        b'>\\x80'
        >>> transport.close()  # doctest: +SKIP
    """

    def __init__(
        self,
        bus_number: int = DEFAULT_BUS_NUMBER,
        device_address: int = DEFAULT_DEVICE_ADDRESS,
    ) -> None:
        if not 0x03 <= device_address <= 0x77:
            raise ValueError(
                f"Invalid I2C address: 0x{device_address:02X} (must be 0x03-0x77)"
            )
        self.bus_number = bus_number
        self.device_address = device_address
        self._bus: SMBus | None = None

    def _ensure_open(self) -> SMBus:
        if self._bus is None:
            _LOGGER.debug("Opening /dev/i2c-%d", self.bus_number)
            self._bus = SMBus(self.bus_number)
        return self._bus

    @handle_bus_errors("I2C block read")
    def read_block(self, address: int, length: int) -> bytes:
        """Read length bytes starting at register address."""
        validate_register_address(address)
        data = bytes(
            self._ensure_open().read_i2c_block_data(
                self.device_address, address, length
            )
        )
        if len(data) != length:
            raise BusError(
                f"Short read at 0x{address:02X}: expected {length} bytes, "
                f"got {len(data)}"
            )
        _LOGGER.debug(
            "0x%02X: read 0x%02X -> %s", self.device_address, address, data.hex()
        )
        return data

    @handle_bus_errors("I2C block write")
    def write_block(self, address: int, data: bytes) -> None:
        """Write data starting at register address."""
        validate_register_address(address)
        _LOGGER.debug(
            "0x%02X: write 0x%02X <- %s", self.device_address, address, data.hex()
        )
        self._ensure_open().write_i2c_block_data(
            self.device_address, address, list(data)
        )

    def close(self) -> None:
        """Close the SMBus handle. Safe to call more than once."""
        if self._bus is not None:
            self._bus.close()
            self._bus = None
            _LOGGER.debug("Closed /dev/i2c-%d", self.bus_number)

    def __repr__(self) -> str:
        return (
            f"SMBusTransport(bus_number={self.bus_number}, "
            f"device_address=0x{self.device_address:02X})"
        )
