"""Domain layer for the LTC2946 telemetry engine.

This layer contains:
- Interfaces: the bus contract the engine consumes
- Value Objects: calibration, register widths, attribute bindings
- Strategies: register codecs and unit conversions
- The static attribute table

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
The bus is abstracted behind IBus.
"""
