"""LTC2946 device facade.

Ltc2946Device is what a host framework (or the CLI) talks to: attach once,
then read and write attributes by name until detach.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .application.use_cases import (
    AttributeReading,
    ReadAttributeUseCase,
    SnapshotUseCase,
    WriteAttributeUseCase,
)
from .config_loader import resolve_calibration
from .const import CTRLA_VOLTAGE_SELECT_ADIN, DEVICE_NAME, REG_CTRLA
from .domain.attribute_table import get_binding, list_attributes
from .domain.entities import DeviceContext
from .domain.exceptions import BusError
from .domain.interfaces import IBus
from .domain.value_objects import AttributeBinding, Calibration

_LOGGER = logging.getLogger(__name__)


class Ltc2946Device:
    """An attached LTC2946.

    Use attach() rather than the constructor so calibration is resolved
    and the chip is brought up.

    Example:
        >>> bus = SMBusTransport(1, 0x67)  # doctest: +SKIP
        >>> cal = {"sense_resistance_microohm": 500}
        >>> dev = Ltc2946Device.attach(bus, cal)  # doctest: +SKIP
        >>> dev.store("curr_max", "20000\\n")  # doctest: +SKIP
        6
        >>> dev.detach()  # doctest: +SKIP
    """

    def __init__(self, context: DeviceContext):
        self._context = context
        self._reader = ReadAttributeUseCase(context)
        self._writer = WriteAttributeUseCase(context)
        self._snapshot = SnapshotUseCase(context)
        self._attached = True

    @classmethod
    def attach(
        cls,
        bus: IBus,
        config: Mapping[str, Any] | None = None,
        name: str = DEVICE_NAME,
        strict_bringup: bool = False,
    ) -> "Ltc2946Device":
        """Attach a device.

        Resolves calibration exactly once, then selects ADIN as the power
        multiplier input (CTRLA). A failed bring-up write is logged and the
        device still attaches, matching the reference driver, unless
        strict_bringup is set.

        Args:
            bus: Bus bound to this device, owned by the device from now on
            config: Optional calibration mapping
            name: Device name for log messages
            strict_bringup: Propagate a failed bring-up write

        Returns:
            Attached device

        Raises:
            ConfigurationError: If the calibration is invalid
            BusError: If strict_bringup is set and the bring-up write fails;
                the bus is closed before the error propagates
        """
        calibration = resolve_calibration(config)
        _LOGGER.info("%s chip found", name)
        _LOGGER.debug("%s calibration: %s", name, calibration)

        try:
            bus.write_block(REG_CTRLA, bytes((CTRLA_VOLTAGE_SELECT_ADIN,)))
        except BusError as err:
            if strict_bringup:
                bus.close()
                raise
            _LOGGER.warning(
                "%s: ADIN channel select failed, voltage readings may be "
                "invalid: %s",
                name,
                err,
            )

        return cls(DeviceContext(bus=bus, calibration=calibration, name=name))

    @property
    def calibration(self) -> Calibration:
        """Calibration resolved at attach."""
        return self._context.calibration

    @property
    def name(self) -> str:
        """Device name."""
        return self._context.name

    @property
    def attached(self) -> bool:
        """False once detach() has run."""
        return self._attached

    def _ensure_attached(self) -> None:
        if not self._attached:
            raise BusError(f"{self.name} is detached")

    def read(self, name: str) -> int:
        """Read an attribute in its export unit."""
        return self.read_reading(name).value

    def read_reading(self, name: str) -> AttributeReading:
        """Read an attribute with its raw value and unit."""
        self._ensure_attached()
        return self._reader.execute(name)

    def write(self, name: str, value: Union[int, str, bytes]) -> int:
        """Write an attribute; returns the raw register value written."""
        self._ensure_attached()
        return self._writer.execute(name, value)

    def show(self, name: str) -> str:
        """Attribute file read: decimal value and newline."""
        return f"{self.read(name)}\n"

    def store(self, name: str, text: Union[str, bytes]) -> int:
        """Attribute file write: returns the number of characters consumed."""
        self.write(name, text)
        return len(text)

    def snapshot(self) -> dict[str, AttributeReading]:
        """Read every attribute once, in table order."""
        self._ensure_attached()
        return self._snapshot.execute()

    @staticmethod
    def attributes() -> list[AttributeBinding]:
        """Bindings of every attribute, in table order."""
        return list_attributes()

    @staticmethod
    def attribute_mode(name: str) -> int:
        """File permission bits of an attribute (0o444 or 0o644)."""
        return get_binding(name).access.file_mode

    def detach(self) -> None:
        """Release the bus. Safe to call more than once."""
        if not self._attached:
            return
        self._attached = False
        self._context.bus.close()
        _LOGGER.info("%s detached", self.name)

    close = detach

    def __enter__(self) -> "Ltc2946Device":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()

    def __repr__(self) -> str:
        return f"Ltc2946Device(name={self.name!r}, calibration={self.calibration!r})"
