"""Value transformation helper functions.

Integer arithmetic used by the register codecs and unit conversions.
The chip's reference arithmetic is C integer math, so division truncates
toward zero instead of flooring.
"""


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Args:
        numerator: Dividend
        denominator: Divisor (must be non-zero)

    Returns:
        Quotient truncated toward zero

    Raises:
        ZeroDivisionError: If denominator is zero

    Examples:
        >>> truncating_div(7, 2)
        3
        >>> truncating_div(-7, 2)
        -3
        >>> truncating_div(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def clamp(value: int, low: int, high: int) -> int:
    """Saturate value to the closed range [low, high].

    Examples:
        >>> clamp(0x1000, 0, 0xFFF)
        4095
        >>> clamp(-5, 0, 0xFFF)
        0
        >>> clamp(42, 0, 0xFFF)
        42
    """
    return max(low, min(value, high))
