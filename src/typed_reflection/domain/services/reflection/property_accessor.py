#!/usr/bin/env python3

"""Typed accessor for private properties."""

from .base_accessor import V, ValueAccessor


class PropertyAccessor(ValueAccessor[V]):
    """A private property obtained through reflection.

    The getter and setter are bound to the target once; a property without a
    setter can still be read, but ``set`` fails with AccessFailure.
    """

    @property
    def can_read(self) -> bool:
        return self._reader is not None

    @property
    def can_write(self) -> bool:
        return self._writer is not None
