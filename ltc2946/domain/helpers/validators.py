"""Validation helper functions.

This module provides validation for register addresses and for the textual
payloads written to attributes.
"""

import re

from ..exceptions import InvalidInputError

# Decimal integer with optional sign and at most one trailing newline
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+\n?")


def validate_register_address(address: int, name: str = "address") -> int:
    """Validate register address is in valid range (0x00-0xFF).

    Args:
        address: Register address to validate
        name: Parameter name for error message

    Returns:
        Validated address

    Raises:
        TypeError: If address is not an integer
        ValueError: If address is out of range

    Examples:
        >>> validate_register_address(0x2A)
        42
    """
    if not isinstance(address, int) or isinstance(address, bool):
        raise TypeError(
            f"Invalid {name}: must be integer, got {type(address).__name__}"
        )

    if not 0 <= address <= 0xFF:
        raise ValueError(f"Invalid {name}: 0x{address:X} (must be 0x00-0xFF)")

    return address


def parse_attribute_input(text: str) -> int:
    """Parse a textual attribute write payload.

    Accepts a base-10 integer with an optional sign and a single trailing
    newline, the way `echo 1000 > power_max` delivers it.

    Args:
        text: Raw payload

    Returns:
        Parsed integer

    Raises:
        InvalidInputError: If text is not a decimal integer

    Examples:
        >>> parse_attribute_input("1000\\n")
        1000
        >>> parse_attribute_input("-25")
        -25
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as err:
            raise InvalidInputError(f"Invalid input: {text!r}") from err

    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text):
        raise InvalidInputError(f"Invalid input: {text!r}")

    return int(text)
