"""Domain helper functions."""

from .transformations import clamp, truncating_div
from .validators import parse_attribute_input, validate_register_address

__all__ = [
    "clamp",
    "truncating_div",
    "parse_attribute_input",
    "validate_register_address",
]
