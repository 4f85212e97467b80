"""Member kinds supported by the reflection layer."""

from enum import Enum


class MemberKind(Enum):
    """Kinds of members that can be accessed through reflection."""

    FIELD = "field"  # Instance/class attributes and __slots__ entries
    PROPERTY = "property"  # property objects (fget/fset)
    METHOD = "method"  # Functions, staticmethods and classmethods

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value
