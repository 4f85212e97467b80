#!/usr/bin/env python3

"""HTTP repository which scrapes mod metadata from a forum-style mod site."""

import re
import traceback
from html.parser import HTMLParser
from typing import Optional
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ...domain.models.reflection import ModInfoModel
from ..logging import get_logger, log_timing
from .repository_base import RepositoryBase

logger = get_logger(__name__)

# Mod IDs are unsigned 32-bit integers
_MOD_ID_PATTERN = re.compile(r"\d+", re.ASCII)
_MAX_MOD_ID = 2**32 - 1


class ModPageParser(HTMLParser):
    """Extracts the mod name and version from a mod page.

    - name: content of the ``<meta name="twitter:title">`` tag
    - version: text of the first ``<span>`` inside an ``<h1>``
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.title: Optional[str] = None
        self.version: Optional[str] = None
        self._h1_depth = 0
        self._in_version_span = False
        self._version_parts: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        attributes = dict(attrs)
        if tag == "meta" and self.title is None and attributes.get("name") == "twitter:title":
            self.title = attributes.get("content")
        elif tag == "h1":
            self._h1_depth += 1
        elif tag == "span" and self._h1_depth and self.version is None:
            self._in_version_span = True

    def handle_endtag(self, tag: str) -> None:
        if tag == "span" and self._in_version_span:
            self._in_version_span = False
            self.version = "".join(self._version_parts)
        elif tag == "h1" and self._h1_depth:
            self._h1_depth -= 1

    def handle_data(self, data: str) -> None:
        if self._in_version_span:
            self._version_parts.append(data)

    @classmethod
    def parse(cls, html: str) -> "ModPageParser":
        parser = cls()
        parser.feed(html)
        parser.close()
        return parser


class ModPageRepository(RepositoryBase):
    """An HTTP client for fetching mod metadata from a mod site's pages.

    Attributes:
        base_url: The base URL for the mod site
        mod_page_url_format: The URL for a mod page excluding the base URL, where {} is the mod ID
        timeout: Per-request timeout in seconds
    """

    TITLE_PREFIX = "[SMAPI] "

    def __init__(
        self,
        vendor_key: str,
        user_agent: str,
        base_url: str,
        mod_page_url_format: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the repository.

        Args:
            vendor_key: The unique key for this vendor
            user_agent: The user agent for the HTTP client
            base_url: The base URL for the mod site
            mod_page_url_format: The URL for a mod page excluding the base URL, where {} is the mod ID
            timeout: Per-request timeout in seconds
            session: Optional preconfigured session (the repository takes ownership of it)
        """
        super().__init__(vendor_key)
        self.base_url = base_url
        self.mod_page_url_format = mod_page_url_format
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=3,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        session.headers.update({"User-Agent": user_agent})
        self.session = session

    def get_page_url(self, mod_id: str) -> str:
        """Get the absolute URL of a mod page."""
        return urljoin(self.base_url.rstrip("/") + "/", self.mod_page_url_format.format(mod_id))

    @log_timing
    def get_mod_info(self, mod_id: str) -> ModInfoModel:
        """Get metadata about a mod in the repository.

        Args:
            mod_id: The mod ID in this repository

        Returns:
            Mod metadata, or a model carrying the reason it couldn't be fetched
        """
        # validate ID format
        if not self._is_valid_id(mod_id):
            return ModInfoModel.failure(
                f"The value '{mod_id}' isn't a valid {self.vendor_key} mod ID, "
                "must be an integer ID."
            )
        mod_id = str(mod_id).strip()

        try:
            url = self.get_page_url(mod_id)

            try:
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
            except requests.HTTPError as e:
                if e.response is not None and e.response.status_code == 404:
                    logger.debug(f"No {self.vendor_key} mod with ID {mod_id}")
                    return ModInfoModel.failure("Found no mod with this ID.")
                raise

            page = ModPageParser.parse(response.text)
            if page.title is None:
                raise ValueError(f"Couldn't find the mod name on {url}")

            name = page.title
            if name.startswith(self.TITLE_PREFIX):
                name = name[len(self.TITLE_PREFIX):]

            return ModInfoModel.success(name, self.normalise_version(page.version), url)
        except Exception:
            logger.debug(f"Lookup of {self.vendor_key} mod {mod_id} failed", exc_info=True)
            return ModInfoModel.failure(traceback.format_exc())

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    @staticmethod
    def _is_valid_id(mod_id: str) -> bool:
        if mod_id is None:
            return False
        mod_id = str(mod_id).strip()
        return bool(_MOD_ID_PATTERN.fullmatch(mod_id)) and int(mod_id) <= _MAX_MOD_ID
