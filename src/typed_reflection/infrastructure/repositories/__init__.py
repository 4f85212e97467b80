#!/usr/bin/env python3

"""Mod metadata repositories."""

from .mod_page_repository import ModPageParser, ModPageRepository
from .repository_base import RepositoryBase

__all__ = [
    "ModPageParser",
    "ModPageRepository",
    "RepositoryBase",
]
