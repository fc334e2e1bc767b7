"""Attribute kinds and variants.

An attribute is one cell of the {Power, Voltage, Current} x {Max, Min, Input}
grid.
"""

from enum import Enum


class AttributeKind(Enum):
    """Physical quantity measured by an attribute."""

    POWER = "power"
    VOLTAGE = "in"
    CURRENT = "curr"

    @property
    def unit(self) -> str:
        """Export unit of the attribute value."""
        return _UNITS[self]


class AttributeVariant(Enum):
    """Which register of a kind the attribute addresses."""

    MAX = "max"
    MIN = "min"
    INPUT = "input"


_UNITS = {
    AttributeKind.POWER: "uW",
    AttributeKind.VOLTAGE: "mV",
    AttributeKind.CURRENT: "mA",
}
