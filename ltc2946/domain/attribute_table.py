"""Static attribute table.

Nine bindings over {power, in, curr} x {max, min, input}. The table is
built once at import time and never changes.
"""

from types import MappingProxyType
from typing import Mapping

from ..const import (
    REG_ADIN,
    REG_DELTA_SENSE,
    REG_MAX_ADIN,
    REG_MAX_DELTA_SENSE,
    REG_MAX_POWER,
    REG_MIN_ADIN,
    REG_MIN_DELTA_SENSE,
    REG_MIN_POWER,
    REG_POWER,
)
from .exceptions import UnknownAttributeError
from .value_objects import (
    Access,
    AttributeBinding,
    AttributeKind,
    AttributeVariant,
    RegisterWidth,
)

# (kind, width, {variant: register})
_LAYOUT = (
    (
        AttributeKind.POWER,
        RegisterWidth.TWENTY_FOUR_BIT,
        {
            AttributeVariant.MAX: REG_MAX_POWER,
            AttributeVariant.MIN: REG_MIN_POWER,
            AttributeVariant.INPUT: REG_POWER,
        },
    ),
    (
        AttributeKind.VOLTAGE,
        RegisterWidth.TWELVE_BIT,
        {
            AttributeVariant.MAX: REG_MAX_ADIN,
            AttributeVariant.MIN: REG_MIN_ADIN,
            AttributeVariant.INPUT: REG_ADIN,
        },
    ),
    (
        AttributeKind.CURRENT,
        RegisterWidth.TWELVE_BIT,
        {
            AttributeVariant.MAX: REG_MAX_DELTA_SENSE,
            AttributeVariant.MIN: REG_MIN_DELTA_SENSE,
            AttributeVariant.INPUT: REG_DELTA_SENSE,
        },
    ),
)


def _build_table() -> Mapping[str, AttributeBinding]:
    table = {}
    for kind, width, registers in _LAYOUT:
        for variant, address in registers.items():
            name = f"{kind.value}_{variant.value}"
            access = (
                Access.READ_ONLY
                if variant is AttributeVariant.INPUT
                else Access.READ_WRITE
            )
            table[name] = AttributeBinding(
                name=name,
                register_address=address,
                width=width,
                access=access,
                kind=kind,
                variant=variant,
            )
    return MappingProxyType(table)


ATTRIBUTE_TABLE: Mapping[str, AttributeBinding] = _build_table()


def get_binding(name: str) -> AttributeBinding:
    """Look up an attribute binding by name.

    Args:
        name: Attribute name, e.g. "in_max"

    Returns:
        The static binding

    Raises:
        UnknownAttributeError: If name is not in the table

    Example:
        >>> get_binding("power_max").register_address
        8
    """
    try:
        return ATTRIBUTE_TABLE[name]
    except (KeyError, TypeError) as err:
        raise UnknownAttributeError(name) from err


def list_attributes() -> list[AttributeBinding]:
    """Return every binding in table order."""
    return list(ATTRIBUTE_TABLE.values())
