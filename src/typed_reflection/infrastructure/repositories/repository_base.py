#!/usr/bin/env python3

"""Base class for mod metadata repositories."""

import re
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from ...domain.models.reflection import ModInfoModel

# A "v" prefix followed by a digit, as in "v1.2.3"
_VERSION_PREFIX = re.compile(r"^v(?=\d)", re.IGNORECASE)


class RepositoryBase(ABC):
    """A repository which provides mod metadata from a remote catalog.

    Repositories own their transport resources; use them as context managers or call
    close() when done.

    Attributes:
        vendor_key: The unique key for this vendor
    """

    def __init__(self, vendor_key: str):
        self.vendor_key = vendor_key

    @abstractmethod
    def get_mod_info(self, mod_id: str) -> ModInfoModel:
        """Get metadata about a mod in the repository.

        Args:
            mod_id: The mod ID in this repository

        Returns:
            Mod metadata, or a model carrying the reason it couldn't be fetched
        """

    @abstractmethod
    def close(self) -> None:
        """Release the resources held by the repository."""

    @staticmethod
    def normalise_version(version: Optional[str]) -> Optional[str]:
        """Normalise a version string (e.g. " v1.2 " becomes "1.2").

        Args:
            version: Raw version text scraped from a mod page

        Returns:
            The normalised version, or None if the text was blank
        """
        if version is None or not version.strip():
            return None
        return _VERSION_PREFIX.sub("", version.strip())

    def __enter__(self) -> "RepositoryBase":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
