#!/usr/bin/env python3

"""Domain repositories."""

from . import cache

__all__ = [
    "cache",
]
