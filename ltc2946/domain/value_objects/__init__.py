"""Value Objects for the LTC2946 domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .access import Access
from .attribute_binding import AttributeBinding
from .attribute_kind import AttributeKind, AttributeVariant
from .calibration import Calibration
from .register_width import RegisterWidth

__all__ = [
    "Access",
    "AttributeBinding",
    "AttributeKind",
    "AttributeVariant",
    "Calibration",
    "RegisterWidth",
]
