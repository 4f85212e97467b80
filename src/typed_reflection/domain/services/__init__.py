#!/usr/bin/env python3

"""Domain services layer."""

from . import reflection

__all__ = [
    "reflection",
]
