"""Attribute use cases."""

from .attribute_reading import AttributeReading
from .read_attribute_use_case import ReadAttributeUseCase
from .snapshot_use_case import SnapshotUseCase
from .write_attribute_use_case import WriteAttributeUseCase

__all__ = [
    "AttributeReading",
    "ReadAttributeUseCase",
    "SnapshotUseCase",
    "WriteAttributeUseCase",
]
