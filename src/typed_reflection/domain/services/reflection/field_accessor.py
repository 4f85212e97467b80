#!/usr/bin/env python3

"""Typed accessor for private fields."""

from .base_accessor import V, ValueAccessor


class FieldAccessor(ValueAccessor[V]):
    """A private field obtained through reflection.

    Covers instance attributes, ``__slots__`` entries and class attributes (static fields).
    """
