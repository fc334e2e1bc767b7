"""Pytest configuration and fixtures for LTC2946 tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import ltc2946 and tests.doubles
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from ltc2946.domain.entities import DeviceContext
from ltc2946.domain.value_objects import Calibration
from tests.doubles import FakeBus


@pytest.fixture
def fake_bus() -> FakeBus:
    """Return an all-zero fake register bus."""
    return FakeBus()


@pytest.fixture
def default_calibration() -> Calibration:
    """Return the default calibration {1000, 1, 1000}."""
    return Calibration()


@pytest.fixture
def unity_divider_calibration() -> Calibration:
    """Return a calibration with a 1:1 divider and a 1 milliohm shunt."""
    return Calibration(sense_resistance_microohm=1000, divider_r1=1, divider_r2=1)


@pytest.fixture
def context(fake_bus, default_calibration) -> DeviceContext:
    """Return a device context over the fake bus."""
    return DeviceContext(bus=fake_bus, calibration=default_calibration)
