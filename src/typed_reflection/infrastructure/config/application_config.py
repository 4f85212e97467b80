"""Application configuration for the command-line tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ... import __version__

DEFAULT_MOD_SITE_BASE_URL = "https://community.playstarbound.com"
DEFAULT_MOD_SITE_PAGE_FORMAT = "resources/{}"
DEFAULT_MOD_SITE_VENDOR_KEY = "Chucklefish"


@dataclass
class Config:
    """Configuration for the typed reflection tools."""

    verbose: bool = False
    log_dir: Optional[Path] = None
    mod_site_base_url: str = DEFAULT_MOD_SITE_BASE_URL
    mod_site_page_format: str = DEFAULT_MOD_SITE_PAGE_FORMAT
    mod_site_vendor_key: str = DEFAULT_MOD_SITE_VENDOR_KEY
    user_agent: str = f"typed-reflection/{__version__}"
    http_timeout: float = 10.0

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            # Real environment variables take precedence over the file
            load_dotenv(env_path, override=False)

        defaults = cls()
        log_dir_str = os.getenv("LOG_DIR", "").strip()
        timeout_str = os.getenv("HTTP_TIMEOUT", "").strip()

        return cls(
            verbose=os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
            mod_site_base_url=os.getenv("MOD_SITE_BASE_URL", defaults.mod_site_base_url),
            mod_site_page_format=os.getenv("MOD_SITE_PAGE_FORMAT", defaults.mod_site_page_format),
            mod_site_vendor_key=os.getenv("MOD_SITE_VENDOR_KEY", defaults.mod_site_vendor_key),
            user_agent=os.getenv("USER_AGENT", defaults.user_agent),
            http_timeout=float(timeout_str) if timeout_str else defaults.http_timeout,
        )

    @classmethod
    def from_args(
        cls,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.mod_site_base_url.startswith(("http://", "https://")):
            raise ValueError(f"Mod site base URL must be an HTTP(S) URL: {self.mod_site_base_url}")

        if "{}" not in self.mod_site_page_format:
            raise ValueError(
                f"Mod page format must contain a '{{}}' placeholder: {self.mod_site_page_format}"
            )

        if self.http_timeout <= 0:
            raise ValueError(f"HTTP timeout must be positive: {self.http_timeout}")

        if self.log_dir is not None and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ValueError(f"Log path is not a directory: {self.log_dir}")

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured and doesn't exist."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
