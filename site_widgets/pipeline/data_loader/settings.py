"""Runtime settings for the site data loader.

This module provides ``SiteDataSettings``, which reads where the three
datasets live, the public site URL used for structured data, and the fetch
timeout from the environment and an optional project ``.env`` file.

Examples
--------
>>> from site_widgets.pipeline.data_loader.settings import SiteDataSettings
>>> settings = SiteDataSettings()
>>> assert settings.request_timeout > 0
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

import site_widgets.config as _project_config
from site_widgets.config import (
    CONTENT_FILENAME,
    DEFAULT_DATA_BASE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SITE_URL,
    OPENINGS_FILENAME,
    SITE_CONFIG_FILENAME,
)
from site_widgets.exceptions import ConfigurationError


@dataclass(frozen=True)
class DataSources:
    """Locations (URLs or file paths) of the three site datasets."""

    site_config: str
    openings: str
    content: str

    @classmethod
    def from_base(cls, base: str | Path) -> DataSources:
        """Build the three sources under one base URL or directory.

        Examples
        --------
        >>> DataSources.from_base("https://example.org/data/").openings
        'https://example.org/data/openings.json'
        """
        base_str = str(base)
        if base_str.startswith(("http://", "https://")):
            root = base_str.rstrip("/")
            return cls(
                site_config=f"{root}/{SITE_CONFIG_FILENAME}",
                openings=f"{root}/{OPENINGS_FILENAME}",
                content=f"{root}/{CONTENT_FILENAME}",
            )
        root_path = Path(base_str)
        return cls(
            site_config=str(root_path / SITE_CONFIG_FILENAME),
            openings=str(root_path / OPENINGS_FILENAME),
            content=str(root_path / CONTENT_FILENAME),
        )


class SiteDataSettings:
    r"""Environment-backed settings for loading and publishing site data.

    Attributes
    ----------
    data_base : str
        Base URL or directory holding the three JSON datasets
        (``SITE_DATA_BASE``).
    site_url : str
        Public site root used to build canonical location URLs
        (``SITE_URL``).
    request_timeout : int
        Per-request timeout in seconds for HTTP fetches
        (``REQUEST_TIMEOUT``).

    Notes
    -----
    Instantiate once at process start. No runtime mutation is intended.
    """

    def __init__(self) -> None:
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)
        self.data_base: str = os.getenv("SITE_DATA_BASE", DEFAULT_DATA_BASE)
        self.site_url: str = os.getenv("SITE_URL", DEFAULT_SITE_URL).rstrip("/")
        try:
            self.request_timeout = int(
                os.getenv("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
            )
        except ValueError as err:
            raise ConfigurationError(
                "REQUEST_TIMEOUT must be an integer number of seconds",
                context={"value": os.getenv("REQUEST_TIMEOUT")},
            ) from err
        if self.request_timeout <= 0:
            raise ConfigurationError(
                "REQUEST_TIMEOUT must be positive",
                context={"value": self.request_timeout},
            )

    @property
    def sources(self) -> DataSources:
        return DataSources.from_base(self.data_base)
