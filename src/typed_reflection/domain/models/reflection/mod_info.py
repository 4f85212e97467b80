#!/usr/bin/env python3

"""Mod metadata model returned by mod repositories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModInfoModel:
    """Metadata about a mod fetched from a remote catalog, or the reason it couldn't be fetched."""

    name: str | None = None
    version: str | None = None
    url: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, name: str, version: str | None, url: str) -> "ModInfoModel":
        """Create a model for a successful lookup."""
        return cls(name=name, version=version, url=url)

    @classmethod
    def failure(cls, error: str) -> "ModInfoModel":
        """Create a model for a failed lookup with a human-readable reason."""
        return cls(error=error)

    @property
    def has_error(self) -> bool:
        return self.error is not None
