"""Fake register bus for testing without I2C hardware.

This fake implements the IBus interface for testing.
"""

from typing import Dict, List, Optional, Tuple

from ltc2946.domain.exceptions import BusError
from ltc2946.domain.interfaces import IBus


class FakeBus(IBus):
    """In-memory register file.

    Reads return bytes from a 256-byte register map, writes store into it.
    Every transaction is recorded, and failures can be injected.

    Attributes:
        registers: Register map (address -> byte)
        reads: History of (address, length) reads
        writes: History of (address, data) writes
        closed: Whether close() was called

    Example:
        >>> bus = FakeBus()
        >>> bus.set_registers(0x14, b"\\x3e\\x80")
        >>> bus.read_block(0x14, 2)
        b'>\\x80'
    """

    def __init__(self) -> None:
        """Initialize an all-zero register map."""
        self.registers: Dict[int, int] = {addr: 0 for addr in range(0x100)}
        self.reads: List[Tuple[int, int]] = []
        self.writes: List[Tuple[int, bytes]] = []
        self.closed = False
        self._fail_reads: Optional[str] = None
        self._fail_writes: Optional[str] = None
        self._short_read = False

    def read_block(self, address: int, length: int) -> bytes:
        """Return length bytes from the register map."""
        self.reads.append((address, length))
        if self._fail_reads is not None:
            raise BusError(self._fail_reads)
        if self._short_read:
            length -= 1
        return bytes(self.registers[(address + i) & 0xFF] for i in range(length))

    def write_block(self, address: int, data: bytes) -> None:
        """Store data into the register map."""
        self.writes.append((address, bytes(data)))
        if self._fail_writes is not None:
            raise BusError(self._fail_writes)
        for i, byte in enumerate(data):
            self.registers[(address + i) & 0xFF] = byte

    def close(self) -> None:
        """Record that the bus was released."""
        self.closed = True

    # Test helper methods

    def set_registers(self, address: int, data: bytes) -> None:
        """Preload register bytes without recording a transaction."""
        for i, byte in enumerate(data):
            self.registers[(address + i) & 0xFF] = byte

    def get_registers(self, address: int, length: int) -> bytes:
        """Peek register bytes without recording a transaction."""
        return bytes(self.registers[(address + i) & 0xFF] for i in range(length))

    def fail_reads(self, message: str = "Simulated read failure") -> None:
        """Make every read raise BusError."""
        self._fail_reads = message

    def fail_writes(self, message: str = "Simulated write failure") -> None:
        """Make every write raise BusError."""
        self._fail_writes = message

    def short_reads(self) -> None:
        """Make every read return one byte less than requested."""
        self._short_read = True

    def clear_history(self) -> None:
        """Forget recorded transactions."""
        self.reads.clear()
        self.writes.clear()
