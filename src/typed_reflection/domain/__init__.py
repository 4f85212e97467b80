#!/usr/bin/env python3

"""Domain layer containing reflection models and services."""

from . import models, repositories, services

__all__ = [
    "models",
    "repositories",
    "services",
]
