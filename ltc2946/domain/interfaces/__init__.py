"""Domain interfaces for the LTC2946 telemetry engine.

This module defines the contracts that infrastructure implementations must
fulfill, so the register bus can be swapped (SMBus, fakes in tests) without
touching conversion logic.
"""

from .i_bus import IBus

__all__ = ["IBus"]
