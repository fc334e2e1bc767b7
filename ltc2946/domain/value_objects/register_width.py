"""RegisterWidth value object.

The LTC2946 exposes two field widths: 24-bit power registers packed into
three bytes, and 12-bit ADC registers left-justified in two bytes.
"""

from enum import Enum


class RegisterWidth(Enum):
    """Register field width.

    Attributes:
        bits: Field width in bits
        length: Number of bus bytes that carry the field

    Example:
        >>> RegisterWidth.TWELVE_BIT.length
        2
        >>> hex(RegisterWidth.TWENTY_FOUR_BIT.max_value)
        '0xffffff'
    """

    TWENTY_FOUR_BIT = (24, 3)
    TWELVE_BIT = (12, 2)

    def __init__(self, bits: int, length: int) -> None:
        self.bits = bits
        self.length = length

    @property
    def max_value(self) -> int:
        """Largest raw value the field can hold."""
        return (1 << self.bits) - 1

    def __str__(self) -> str:
        return f"{self.bits}-bit"
