"""Tests for SnapshotUseCase."""

import pytest

from ltc2946.application.use_cases import SnapshotUseCase
from ltc2946.domain.exceptions import BusError


class TestSnapshotUseCase:
    """Test suite for SnapshotUseCase."""

    def test_reads_all_in_table_order(self, context, fake_bus):
        fake_bus.set_registers(0x05, b"\x00\x00\x20")
        fake_bus.set_registers(0x14, b"\x3e\x80")

        readings = SnapshotUseCase(context).execute()

        assert list(readings) == [
            "power_max",
            "power_min",
            "power_input",
            "in_max",
            "in_min",
            "in_input",
            "curr_max",
            "curr_min",
            "curr_input",
        ]
        assert readings["power_input"].value == 1000
        assert readings["curr_input"].value == 25000
        assert len(fake_bus.reads) == 9

    def test_first_bus_error_aborts(self, context, fake_bus):
        fake_bus.fail_reads()
        with pytest.raises(BusError):
            SnapshotUseCase(context).execute()
        assert len(fake_bus.reads) == 1
