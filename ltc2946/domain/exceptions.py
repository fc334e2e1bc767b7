"""Custom exceptions for the LTC2946 telemetry engine.

Every error raised by this package derives from Ltc2946Error so callers can
catch the whole family with one clause.
"""


class Ltc2946Error(Exception):
    """Base class for LTC2946 errors."""


class BusError(Ltc2946Error):
    """A register bus transaction failed.

    Raised by the bus collaborator and propagated unchanged through the
    attribute layer. The engine never retries the transaction.

    Example:
        >>> raise BusError("read of 0x05 failed: [Errno 121] Remote I/O error")  # doctest: +SKIP
    """


class UnknownAttributeError(Ltc2946Error, KeyError):
    """Requested attribute name is not in the attribute table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown attribute: {self.name!r}"


class NotWritableError(Ltc2946Error):
    """Attempted to write a read-only attribute."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Attribute {name!r} is read-only")
        self.name = name


class InvalidInputError(Ltc2946Error, ValueError):
    """Write payload is not a decimal integer.

    Raised before any bus traffic, so a rejected write never touches the
    device.
    """


class ConfigurationError(Ltc2946Error):
    """Attach-time configuration is invalid.

    The device cannot be attached when this is raised.
    """
