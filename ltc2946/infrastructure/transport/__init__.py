"""Bus transports."""

from .smbus_transport import SMBusTransport

__all__ = ["SMBusTransport"]
