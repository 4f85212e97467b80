#!/usr/bin/env python3

"""Domain models for typed reflection."""

from . import reflection

__all__ = [
    "reflection",
]
