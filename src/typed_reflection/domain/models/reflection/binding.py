#!/usr/bin/env python3

"""Binding of a member descriptor to an optional target instance."""

from dataclasses import dataclass
from typing import Any

from .member_descriptor import MemberDescriptor


@dataclass(frozen=True)
class Binding:
    """A member descriptor paired with zero or one target instance.

    The instance is a plain, non-owning reference: the binding never copies,
    closes or otherwise manages the target object.

    Attributes:
        descriptor: The member metadata
        instance: The target object, or None for a static member
        declaring_type: The type the member was requested on; may be a subclass of
            the type that declares it (defaults to the descriptor's declaring type)
    """

    descriptor: MemberDescriptor
    instance: Any = None
    declaring_type: type | None = None

    @property
    def is_static(self) -> bool:
        return self.descriptor.is_static

    @property
    def target_type(self) -> type:
        """The type static members are read from and written to."""
        return self.declaring_type or self.descriptor.declaring_type

    @property
    def owner(self) -> Any:
        """The object member lookups are performed on (the instance, or the type if static)."""
        return self.target_type if self.instance is None else self.instance

    @property
    def display_name(self) -> str:
        return self.descriptor.display_name
