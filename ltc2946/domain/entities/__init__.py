"""Domain entities."""

from .device_context import DeviceContext

__all__ = ["DeviceContext"]
