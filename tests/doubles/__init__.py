"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Example:
    >>> from tests.doubles import FakeBus
    >>> bus = FakeBus()
    >>> bus.set_registers(0x05, b"\\x00\\x00\\x20")
    >>> bus.read_block(0x05, 3)
    b'\\x00\\x00 '
"""

from .fake_bus import FakeBus

__all__ = ["FakeBus"]
