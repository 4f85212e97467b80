#!/usr/bin/env python3

"""Member descriptor model for reflected access."""

from dataclasses import dataclass, field
from typing import Any

from .member_kind import MemberKind
from .naming import member_display_name


@dataclass(frozen=True)
class MemberDescriptor:
    """Immutable metadata about one accessible member of a type."""

    declaring_type: type
    name: str
    kind: MemberKind
    value_type: Any = Any  # Declared annotation; return annotation for methods
    is_static: bool = False
    attribute_name: str = ""  # Name after private-name mangling
    raw: Any = field(default=None, compare=False, repr=False)
    """Underlying object from the class namespace (property, function, slot), if any."""

    def __post_init__(self) -> None:
        if not self.attribute_name:
            object.__setattr__(self, "attribute_name", self.name)

    @property
    def display_name(self) -> str:
        """The "<type>::<member>" name used in diagnostics."""
        return member_display_name(self.declaring_type, self.name)
