"""AttributeBinding value object.

Binds a named attribute to its register, field width, access mode and the
conversion kind applied to the raw value.
"""

from dataclasses import dataclass

from ..helpers.validators import validate_register_address
from .access import Access
from .attribute_kind import AttributeKind, AttributeVariant
from .register_width import RegisterWidth


@dataclass(frozen=True)
class AttributeBinding:
    """Immutable attribute binding.

    Attributes:
        name: Attribute name, e.g. "power_max"
        register_address: First register of the field (0x00-0xFF)
        width: Field width
        access: Read-only or read/write
        kind: Conversion family
        variant: Max, min or instantaneous reading

    Example:
        >>> binding = AttributeBinding(
        ...     name="curr_input",
        ...     register_address=0x14,
        ...     width=RegisterWidth.TWELVE_BIT,
        ...     access=Access.READ_ONLY,
        ...     kind=AttributeKind.CURRENT,
        ...     variant=AttributeVariant.INPUT,
        ... )
        >>> binding.writable
        False
    """

    name: str
    register_address: int
    width: RegisterWidth
    access: Access
    kind: AttributeKind
    variant: AttributeVariant

    def __post_init__(self) -> None:
        validate_register_address(self.register_address, "register_address")

    @property
    def writable(self) -> bool:
        """True if the attribute accepts writes."""
        return self.access.writable

    @property
    def unit(self) -> str:
        """Export unit of the attribute."""
        return self.kind.unit

    def __str__(self) -> str:
        return (
            f"{self.name} (0x{self.register_address:02X}, {self.width}, "
            f"{self.access.value})"
        )
