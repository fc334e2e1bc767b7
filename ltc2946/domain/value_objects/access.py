"""Attribute access modes."""

from enum import Enum


class Access(Enum):
    """Whether an attribute accepts writes."""

    READ_ONLY = "ro"
    READ_WRITE = "rw"

    @property
    def writable(self) -> bool:
        """True for READ_WRITE."""
        return self is Access.READ_WRITE

    @property
    def file_mode(self) -> int:
        """Permission bits a host framework would give the attribute file."""
        return 0o644 if self.writable else 0o444
