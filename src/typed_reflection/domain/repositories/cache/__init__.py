#!/usr/bin/env python3

"""Cache implementations for reflection metadata."""

from .lookup_cache import LookupCache

__all__ = [
    "LookupCache",
]
