"""Per-device context.

A DeviceContext is created once when a device is attached and passed by
reference into every attribute operation. It is never shared between
devices.
"""

from dataclasses import dataclass

from ...const import DEVICE_NAME
from ..interfaces import IBus
from ..value_objects import Calibration


@dataclass(frozen=True)
class DeviceContext:
    """Bus handle and calibration of one attached device.

    Attributes:
        bus: Register bus used exclusively by this device
        calibration: Calibration resolved at attach, immutable afterwards
        name: Device name used in log messages
    """

    bus: IBus
    calibration: Calibration
    name: str = DEVICE_NAME
