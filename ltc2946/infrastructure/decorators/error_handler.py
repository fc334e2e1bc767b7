"""Error handling decorators for standardized exception handling."""

import logging
from functools import wraps
from typing import Callable

from ...domain.exceptions import BusError


def handle_bus_errors(operation_name: str, logger: logging.Logger = None):
    """Decorator for standardized bus error handling.

    Every failure is logged and re-raised. OSError raised by the bus driver
    is re-raised as BusError, chained to the original.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)

    Example:
        @handle_bus_errors("I2C block read")
        def read_block(self, address: int, length: int) -> bytes:
            return bytes(self._bus.read_i2c_block_data(self._addr, address, length))
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except BusError as err:
                log.error("%s bus error: %s", operation_name, err)
                raise
            except OSError as err:
                log.error("%s I/O error: %s", operation_name, err)
                raise BusError(f"{operation_name} failed: {err}") from err
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise

        return wrapper

    return decorator
