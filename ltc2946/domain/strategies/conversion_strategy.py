"""Unit conversion strategies.

One conversion pair per attribute kind, shared by the max, min and input
registers of that kind. Every division truncates toward zero.

LSB weights:
- Power: 31.25 uW (31250 nW) per count, exported in microwatts
- ADIN voltage: 0.5 mV (500 uV) per count, scaled up through the divider
- Delta-sense voltage: 25 uV (25000 nV) per count, divided by the sense
  resistor to give milliamps
"""

from abc import ABC, abstractmethod

from ..helpers.transformations import truncating_div
from ..value_objects.attribute_kind import AttributeKind
from ..value_objects.calibration import Calibration

POWER_LSB_NW = 31250
ADIN_LSB_UV = 500
DELTA_SENSE_LSB_NV = 25000


class ConversionStrategy(ABC):
    """Abstract conversion between raw register counts and export units."""

    kind: AttributeKind

    @abstractmethod
    def to_physical(self, raw_value: int, calibration: Calibration) -> int:
        """Convert a raw register value to the export unit.

        Args:
            raw_value: Decoded register field
            calibration: Board calibration of the device

        Returns:
            Value in the attribute's export unit
        """

    @abstractmethod
    def to_raw(self, value: int, calibration: Calibration) -> int:
        """Convert an export-unit value to a raw register value.

        The result is not clamped; the register codec saturates it.

        Args:
            value: Value in the attribute's export unit
            calibration: Board calibration of the device

        Returns:
            Unbounded raw register value
        """


class PowerConversion(ConversionStrategy):
    """Power in microwatts.

    The write path is not an exact inverse of the read path; a round trip
    loses up to one LSB.

    Example:
        >>> conv = PowerConversion()
        >>> conv.to_physical(32, Calibration())
        1000
        >>> conv.to_raw(1000, Calibration())
        32
    """

    kind = AttributeKind.POWER

    def to_physical(self, raw_value: int, calibration: Calibration) -> int:
        nanowatts = raw_value * POWER_LSB_NW
        return truncating_div(nanowatts, 1000)

    def to_raw(self, value: int, calibration: Calibration) -> int:
        return truncating_div(value * 1000, POWER_LSB_NW)


class VoltageConversion(ConversionStrategy):
    """Rail voltage in millivolts, compensated for the ADIN divider.

    Reads scale the pin voltage up by (r1 + r2) / r2. Writes divide by the
    divider first, then by the LSB; this order is kept as is since field
    calibrations depend on the resulting rounding.

    Example:
        >>> conv = VoltageConversion()
        >>> conv.to_physical(0x100, Calibration(divider_r1=1, divider_r2=1))
        256
    """

    kind = AttributeKind.VOLTAGE

    def to_physical(self, raw_value: int, calibration: Calibration) -> int:
        pin_mv = truncating_div(raw_value * ADIN_LSB_UV, 1000)
        return truncating_div(
            pin_mv * calibration.divider_total, calibration.divider_r2
        )

    def to_raw(self, value: int, calibration: Calibration) -> int:
        pin_mv = truncating_div(
            value * calibration.divider_r2, calibration.divider_total
        )
        return truncating_div(pin_mv * 1000, ADIN_LSB_UV)


class CurrentConversion(ConversionStrategy):
    """Current in milliamps through the external sense resistor.

    Example:
        >>> conv = CurrentConversion()
        >>> conv.to_physical(0x3E8, Calibration(sense_resistance_microohm=1000))
        25000
    """

    kind = AttributeKind.CURRENT

    def to_physical(self, raw_value: int, calibration: Calibration) -> int:
        nanovolts = raw_value * DELTA_SENSE_LSB_NV
        return truncating_div(nanovolts, calibration.sense_resistance_microohm)

    def to_raw(self, value: int, calibration: Calibration) -> int:
        return truncating_div(
            value * calibration.sense_resistance_microohm, DELTA_SENSE_LSB_NV
        )


class ConversionFactory:
    """Factory returning the conversion for an attribute kind."""

    _conversions = {
        AttributeKind.POWER: PowerConversion(),
        AttributeKind.VOLTAGE: VoltageConversion(),
        AttributeKind.CURRENT: CurrentConversion(),
    }

    @classmethod
    def get_conversion(cls, kind: AttributeKind) -> ConversionStrategy:
        """Get conversion for an attribute kind.

        Raises:
            ValueError: If kind has no conversion
        """
        conversion = cls._conversions.get(kind)
        if conversion is None:
            raise ValueError(f"No conversion for attribute kind: {kind}")
        return conversion
