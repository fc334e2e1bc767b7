"""WriteAttributeUseCase for LTC2946 attribute writes.

This use case orchestrates the attribute write workflow:
1. Resolve the binding and reject read-only attributes
2. Parse textual input (before any bus traffic)
3. Convert to a raw value and encode it, saturating to the field width
4. Replace the whole register field with one block write
"""

import logging
from typing import Union

from ...domain.attribute_table import get_binding
from ...domain.entities import DeviceContext
from ...domain.exceptions import NotWritableError
from ...domain.helpers.validators import parse_attribute_input
from ...domain.strategies import CodecFactory, ConversionFactory

_LOGGER = logging.getLogger(__name__)


class WriteAttributeUseCase:
    """Use case for writing one attribute.

    Values outside the register field are clamped, not rejected. The
    returned raw value is the one actually written.

    Example:
        >>> use_case = WriteAttributeUseCase(context)  # doctest: +SKIP
        >>> use_case.execute("power_max", "1000\\n")  # doctest: +SKIP
        32
    """

    def __init__(self, context: DeviceContext):
        """Initialize use case with the device context.

        Args:
            context: Bus and calibration of the device
        """
        self._context = context

    def execute(self, name: str, value: Union[int, str, bytes]) -> int:
        """Write an attribute.

        Args:
            name: Attribute name
            value: Integer in the export unit, or its decimal text

        Returns:
            Raw register value written

        Raises:
            UnknownAttributeError: If name is not in the attribute table
            NotWritableError: If the attribute is read-only
            InvalidInputError: If value is not a decimal integer
            BusError: If the register write fails
        """
        binding = get_binding(name)
        if not binding.writable:
            raise NotWritableError(name)

        if isinstance(value, int) and not isinstance(value, bool):
            requested = value
        else:
            requested = parse_attribute_input(value)

        codec = CodecFactory.get_codec(binding.width)
        conversion = ConversionFactory.get_conversion(binding.kind)

        data = codec.encode(
            conversion.to_raw(requested, self._context.calibration)
        )
        raw_value = codec.decode(data)

        _LOGGER.debug(
            "%s: %s %d %s -> raw 0x%X",
            self._context.name,
            name,
            requested,
            binding.unit,
            raw_value,
        )
        self._context.bus.write_block(binding.register_address, data)
        return raw_value
