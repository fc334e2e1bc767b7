"""ReadAttributeUseCase for LTC2946 attribute reads.

Resolves the attribute binding, reads the full register field, decodes it
with the codec of the field width and converts it with the device
calibration.
"""

import logging

from ...domain.attribute_table import get_binding
from ...domain.entities import DeviceContext
from ...domain.strategies import CodecFactory, ConversionFactory
from .attribute_reading import AttributeReading

_LOGGER = logging.getLogger(__name__)


class ReadAttributeUseCase:
    """Use case for reading one attribute.

    Bus errors propagate unchanged; nothing is cached.

    Example:
        >>> use_case = ReadAttributeUseCase(context)  # doctest: +SKIP
        >>> use_case.execute("curr_input").value  # doctest: +SKIP
        25000
    """

    def __init__(self, context: DeviceContext):
        """Initialize use case with the device context.

        Args:
            context: Bus and calibration of the device
        """
        self._context = context

    def execute(self, name: str) -> AttributeReading:
        """Read an attribute.

        Args:
            name: Attribute name

        Returns:
            AttributeReading with raw and converted value

        Raises:
            UnknownAttributeError: If name is not in the attribute table
            BusError: If the register read fails
        """
        binding = get_binding(name)
        codec = CodecFactory.get_codec(binding.width)
        conversion = ConversionFactory.get_conversion(binding.kind)

        data = self._context.bus.read_block(
            binding.register_address, binding.width.length
        )
        raw_value = codec.decode(data)
        value = conversion.to_physical(raw_value, self._context.calibration)

        _LOGGER.debug(
            "%s: %s raw 0x%X -> %d %s",
            self._context.name,
            name,
            raw_value,
            value,
            binding.unit,
        )
        return AttributeReading(
            name=name, raw_value=raw_value, value=value, unit=binding.unit
        )
