"""Calibration value object.

Board-specific constants resolved once when the device is attached: the
current-sense resistor and the resistive divider in front of the ADIN pin.
"""

from dataclasses import dataclass
from typing import Final

DEFAULT_SENSE_RESISTANCE_MICROOHM: Final[int] = 1000
DEFAULT_DIVIDER_R1: Final[int] = 1
DEFAULT_DIVIDER_R2: Final[int] = 1000

U32_MAX: Final[int] = 0xFFFFFFFF


@dataclass(frozen=True)
class Calibration:
    """Immutable board calibration.

    All three values divide something in the conversion path, so each must
    be strictly positive and fit in 32 bits.

    Attributes:
        sense_resistance_microohm: Current-sense resistor in micro-ohms
        divider_r1: Upper divider resistor (rail to ADIN)
        divider_r2: Lower divider resistor (ADIN to ground)

    Example:
        >>> cal = Calibration()
        >>> cal.divider_r1, cal.divider_r2
        (1, 1000)
        >>> Calibration(sense_resistance_microohm=0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: sense_resistance_microohm must be between 1 and 4294967295, got 0
    """

    sense_resistance_microohm: int = DEFAULT_SENSE_RESISTANCE_MICROOHM
    divider_r1: int = DEFAULT_DIVIDER_R1
    divider_r2: int = DEFAULT_DIVIDER_R2

    def __post_init__(self) -> None:
        """Validate calibration values.

        Raises:
            TypeError: If a value is not an integer
            ValueError: If a value is outside 1..0xFFFFFFFF
        """
        for name in ("sense_resistance_microohm", "divider_r1", "divider_r2"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
            if not 1 <= value <= U32_MAX:
                raise ValueError(
                    f"{name} must be between 1 and {U32_MAX}, got {value}"
                )

    @property
    def divider_total(self) -> int:
        """Sum of both divider legs."""
        return self.divider_r1 + self.divider_r2

    def as_dict(self) -> dict[str, int]:
        """Return the calibration as a plain mapping."""
        return {
            "sense_resistance_microohm": self.sense_resistance_microohm,
            "divider_r1": self.divider_r1,
            "divider_r2": self.divider_r2,
        }
