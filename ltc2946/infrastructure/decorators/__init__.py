"""Cross-cutting decorators for infrastructure code."""

from .error_handler import handle_bus_errors

__all__ = ["handle_bus_errors"]
