"""Attribute Reading DTO.

Data Transfer Object representing one decoded attribute read.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttributeReading:
    """Result of an attribute read.

    Attributes:
        name: Attribute name
        raw_value: Decoded register field
        value: Value in the export unit
        unit: Export unit ("uW", "mV" or "mA")
    """

    name: str
    raw_value: int
    value: int
    unit: str

    def __str__(self) -> str:
        return f"{self.name} = {self.value} {self.unit} (raw 0x{self.raw_value:X})"
