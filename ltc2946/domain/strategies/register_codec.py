"""Register codecs using Strategy pattern.

Maps raw bus bytes to field-width-bounded integers and back.

Encoding saturates: a value outside the field is clamped to the nearest
representable value instead of raising. This matches the hardware field
width and is intentional, so encoders never fail.
"""

from abc import ABC, abstractmethod

from ..exceptions import BusError
from ..helpers.transformations import clamp
from ..value_objects.register_width import RegisterWidth

MAX_24BIT = 0xFFFFFF
MAX_12BIT = 0xFFF


def _check_length(data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise BusError(f"Expected {expected} register bytes, got {len(data)}")


def decode24(data: bytes) -> int:
    """Decode a 24-bit big-endian field.

    Examples:
        >>> decode24(b"\\x12\\x34\\x56") == 0x123456
        True
    """
    _check_length(data, 3)
    return (data[0] << 16) | (data[1] << 8) | data[2]


def encode24(value: int) -> bytes:
    """Encode a 24-bit field, saturating to 0..0xFFFFFF.

    Examples:
        >>> encode24(0x123456)
        b'\\x124V'
        >>> encode24(0x1000000)
        b'\\xff\\xff\\xff'
    """
    value = clamp(value, 0, MAX_24BIT)
    return bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))


def decode12(data: bytes) -> int:
    """Decode a 12-bit field left-justified in two bytes.

    The first byte carries bits 11..4, the high nibble of the second byte
    carries bits 3..0; its low nibble is unused.

    Examples:
        >>> decode12(b"\\x10\\x00")
        256
        >>> decode12(b"\\xff\\xf0")
        4095
    """
    _check_length(data, 2)
    return ((data[0] << 4) | (data[1] >> 4)) & MAX_12BIT


def encode12(value: int) -> bytes:
    """Encode a 12-bit field, saturating to 0..0xFFF.

    Examples:
        >>> encode12(0x3E8)
        b'>\\x80'
        >>> encode12(-1)
        b'\\x00\\x00'
    """
    value = clamp(value, 0, MAX_12BIT)
    return bytes(((value >> 4) & 0xFF, (value << 4) & 0xF0))


class RegisterCodec(ABC):
    """Abstract strategy for one register field width."""

    width: RegisterWidth

    @abstractmethod
    def decode(self, data: bytes) -> int:
        """Decode bus bytes to a raw field value.

        Args:
            data: Exactly width.length bytes read from the bus

        Returns:
            Raw unsigned field value

        Raises:
            BusError: If data has the wrong length
        """

    @abstractmethod
    def encode(self, raw_value: int) -> bytes:
        """Encode a raw value to bus bytes, clamping to the field.

        Args:
            raw_value: Value to store, any integer

        Returns:
            width.length bytes ready for a block write
        """


class TwentyFourBitCodec(RegisterCodec):
    """Codec for 24-bit power registers."""

    width = RegisterWidth.TWENTY_FOUR_BIT

    def decode(self, data: bytes) -> int:
        return decode24(data)

    def encode(self, raw_value: int) -> bytes:
        return encode24(raw_value)


class TwelveBitCodec(RegisterCodec):
    """Codec for 12-bit ADC registers."""

    width = RegisterWidth.TWELVE_BIT

    def decode(self, data: bytes) -> int:
        return decode12(data)

    def encode(self, raw_value: int) -> bytes:
        return encode12(raw_value)


class CodecFactory:
    """Factory returning the codec for a register width."""

    _codecs = {
        RegisterWidth.TWENTY_FOUR_BIT: TwentyFourBitCodec(),
        RegisterWidth.TWELVE_BIT: TwelveBitCodec(),
    }

    @classmethod
    def get_codec(cls, width: RegisterWidth) -> RegisterCodec:
        """Get codec for a register width.

        Args:
            width: Register field width

        Returns:
            Shared codec instance

        Raises:
            ValueError: If width has no codec

        Example:
            >>> codec = CodecFactory.get_codec(RegisterWidth.TWELVE_BIT)
            >>> codec.decode(b"\\x3e\\x80")
            1000
        """
        codec = cls._codecs.get(width)
        if codec is None:
            raise ValueError(f"No codec for register width: {width}")
        return codec
