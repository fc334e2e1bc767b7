"""SnapshotUseCase: read every attribute once, in table order."""

from collections import OrderedDict

from ...domain.attribute_table import list_attributes
from ...domain.entities import DeviceContext
from .attribute_reading import AttributeReading
from .read_attribute_use_case import ReadAttributeUseCase


class SnapshotUseCase:
    """Read all nine attributes.

    The first bus error aborts the snapshot and propagates.
    """

    def __init__(self, context: DeviceContext):
        self._read = ReadAttributeUseCase(context)

    def execute(self) -> "OrderedDict[str, AttributeReading]":
        readings = OrderedDict()
        for binding in list_attributes():
            readings[binding.name] = self._read.execute(binding.name)
        return readings
