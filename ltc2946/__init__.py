"""LTC2946 telemetry attribute engine.

This package provides:
- Register codecs for the chip's 24-bit and 12-bit fields
- Unit conversions for power, ADIN voltage and sense-resistor current
- A static table of nine attributes with read/write dispatch
- Attach-time calibration from a mapping or YAML file
- An smbus2 bus transport and the ``ltc2946`` command-line tool
"""

__version__ = "1.0.0"

from .config_loader import load_device_config, resolve_calibration
from .device import Ltc2946Device
from .domain.attribute_table import ATTRIBUTE_TABLE, get_binding, list_attributes
from .domain.exceptions import (
    BusError,
    ConfigurationError,
    InvalidInputError,
    Ltc2946Error,
    NotWritableError,
    UnknownAttributeError,
)
from .domain.interfaces import IBus
from .domain.value_objects import Calibration

__all__ = [
    "ATTRIBUTE_TABLE",
    "BusError",
    "Calibration",
    "ConfigurationError",
    "IBus",
    "InvalidInputError",
    "Ltc2946Device",
    "Ltc2946Error",
    "NotWritableError",
    "UnknownAttributeError",
    "get_binding",
    "list_attributes",
    "load_device_config",
    "resolve_calibration",
]
