"""Attach-time configuration loading and calibration resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import voluptuous as vol
import yaml

from .const import (
    CONF_ADDRESS,
    CONF_BUS,
    CONF_DIVIDER_R1,
    CONF_DIVIDER_R2,
    CONF_SENSE_RESISTANCE,
    CONFIG_ROOT_KEY,
    DEFAULT_BUS_NUMBER,
    DEFAULT_DEVICE_ADDRESS,
)
from .domain.exceptions import ConfigurationError
from .domain.value_objects.calibration import (
    DEFAULT_DIVIDER_R1,
    DEFAULT_DIVIDER_R2,
    DEFAULT_SENSE_RESISTANCE_MICROOHM,
    U32_MAX,
    Calibration,
)

_LOGGER = logging.getLogger(__name__)

EXAMPLE_CONFIG = Path(__file__).parent / "config" / "ltc2946.yaml"


def _strict_int(value: Any) -> int:
    """Accept ints (not bools) and decimal/hex strings."""
    if isinstance(value, bool):
        raise vol.Invalid(f"expected integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError as err:
            raise vol.Invalid(f"expected integer, got {value!r}") from err
    raise vol.Invalid(f"expected integer, got {type(value).__name__}")


_U32_POSITIVE = vol.All(_strict_int, vol.Range(min=1, max=U32_MAX))

CALIBRATION_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_SENSE_RESISTANCE, default=DEFAULT_SENSE_RESISTANCE_MICROOHM
        ): _U32_POSITIVE,
        vol.Optional(CONF_DIVIDER_R1, default=DEFAULT_DIVIDER_R1): _U32_POSITIVE,
        vol.Optional(CONF_DIVIDER_R2, default=DEFAULT_DIVIDER_R2): _U32_POSITIVE,
    },
    extra=vol.REMOVE_EXTRA,
)

DEVICE_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_BUS, default=DEFAULT_BUS_NUMBER): vol.All(
            _strict_int, vol.Range(min=0)
        ),
        vol.Optional(CONF_ADDRESS, default=DEFAULT_DEVICE_ADDRESS): vol.All(
            _strict_int, vol.Range(min=0x03, max=0x77)
        ),
        vol.Optional(CONF_SENSE_RESISTANCE): _U32_POSITIVE,
        vol.Optional(CONF_DIVIDER_R1): _U32_POSITIVE,
        vol.Optional(CONF_DIVIDER_R2): _U32_POSITIVE,
    }
)


def _drop_empty(config: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys written without a value (`divider_r1:` loads as None)."""
    return {key: value for key, value in config.items() if value is not None}


def resolve_calibration(config: Mapping[str, Any] | None = None) -> Calibration:
    """Resolve board calibration from an optional configuration mapping.

    Missing keys and keys with no value (None) fall back to their
    defaults; keys other than the three calibration keys are ignored.

    Args:
        config: Mapping with up to three calibration keys, or None

    Returns:
        Immutable Calibration

    Raises:
        ConfigurationError: If a present key is not a positive 32-bit integer

    Example:
        >>> resolve_calibration({"divider_r1": 9})
        Calibration(sense_resistance_microohm=1000, divider_r1=9, divider_r2=1000)
    """
    if config is None:
        config = {}
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Calibration config must be a mapping, got {type(config).__name__}"
        )

    config = _drop_empty(config)

    try:
        resolved = CALIBRATION_SCHEMA(config)
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid calibration: {err}") from err

    for key, default in (
        (CONF_SENSE_RESISTANCE, DEFAULT_SENSE_RESISTANCE_MICROOHM),
        (CONF_DIVIDER_R1, DEFAULT_DIVIDER_R1),
        (CONF_DIVIDER_R2, DEFAULT_DIVIDER_R2),
    ):
        if key not in config:
            _LOGGER.debug("%s not configured, using default %d", key, default)

    return Calibration(**resolved)


def load_device_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a device configuration file.

    The file holds a top-level ``ltc2946`` mapping:

        ltc2946:
          bus: 1
          address: 0x67
          sense_resistance_microohm: 500
          divider_r1: 10000
          divider_r2: 1000

    Args:
        path: YAML file path

    Returns:
        Validated configuration dict (bus and address filled with defaults)

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML: {err}") from err

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must contain a mapping")

    section = data.get(CONFIG_ROOT_KEY)
    if section is None:
        section = {}
    if isinstance(section, dict):
        section = _drop_empty(section)

    try:
        config = DEVICE_CONFIG_SCHEMA(section)
    except vol.Invalid as err:
        raise ConfigurationError(
            f"Invalid configuration in {config_file}: {err}"
        ) from err

    _LOGGER.info(
        "Loaded device configuration from %s: bus %d, address 0x%02X",
        config_file,
        config[CONF_BUS],
        config[CONF_ADDRESS],
    )
    return config
