"""Constants for the LTC2946 telemetry engine.

Register addresses and bus settings of the LTC2946 wide-range I2C power,
charge and energy monitor.
"""

from __future__ import annotations

# Device identification
DEVICE_NAME = "ltc2946"
DEVICE_COMPATIBLE = "lltc,ltc2946"
DEFAULT_BUS_NUMBER = 1
DEFAULT_DEVICE_ADDRESS = 0x67

# Control registers
REG_CTRLA = 0x00
REG_CTRLB = 0x01

# CTRLA[4:3] = 01 multiplies the sense current by ADIN instead of SENSE+
CTRLA_VOLTAGE_SELECT_ADIN = 0x08

# Power registers (24-bit)
REG_POWER = 0x05
REG_MAX_POWER = 0x08
REG_MIN_POWER = 0x0B

# Delta-sense registers (12-bit)
REG_DELTA_SENSE = 0x14
REG_MAX_DELTA_SENSE = 0x16
REG_MIN_DELTA_SENSE = 0x18

# ADIN registers (12-bit)
REG_ADIN = 0x28
REG_MAX_ADIN = 0x2A
REG_MIN_ADIN = 0x2C

# Configuration keys
CONF_SENSE_RESISTANCE = "sense_resistance_microohm"
CONF_DIVIDER_R1 = "divider_r1"
CONF_DIVIDER_R2 = "divider_r2"
CONF_BUS = "bus"
CONF_ADDRESS = "address"
CONFIG_ROOT_KEY = DEVICE_NAME
