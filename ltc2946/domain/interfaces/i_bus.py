"""IBus interface for register bus implementations."""

from abc import ABC, abstractmethod


class IBus(ABC):
    """Interface for a byte-oriented register bus bound to one device.

    Each call is one blocking request/response transaction. Implementations
    raise BusError on failure; the engine never retries.

    Example:
        >>> bus = SMBusTransport(bus_number=1, device_address=0x67)  # doctest: +SKIP
        >>> data = bus.read_block(0x05, 3)  # doctest: +SKIP
        >>> bus.write_block(0x08, b"\\x00\\x00\\x20")  # doctest: +SKIP
        >>> bus.close()  # doctest: +SKIP
    """

    @abstractmethod
    def read_block(self, address: int, length: int) -> bytes:
        """Read consecutive registers.

        Args:
            address: First register address (0x00-0xFF)
            length: Number of bytes to read

        Returns:
            Exactly length bytes

        Raises:
            BusError: If the transaction fails
        """

    @abstractmethod
    def write_block(self, address: int, data: bytes) -> None:
        """Write consecutive registers.

        Args:
            address: First register address (0x00-0xFF)
            data: Bytes to write

        Raises:
            BusError: If the transaction fails
        """

    def close(self) -> None:
        """Release the bus handle. Default is a no-op."""
