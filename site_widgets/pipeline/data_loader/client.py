"""data_loader.client module.

This module defines ``SiteDataClient``, the asynchronous I/O boundary for
reading one site dataset. HTTP(S) sources are fetched with ``aiohttp``;
anything else is treated as a local file path and read off the event loop.

The client performs no retries: each failure (network error, timeout,
non-200 status, unreadable file, invalid JSON) is raised once as a
``DataLoadError`` carrying the source in its context.

Examples
--------
>>> import aiohttp
>>> from site_widgets.pipeline.data_loader.client import SiteDataClient
>>> client = SiteDataClient(request_timeout=5)
>>> async def main():
...     async with aiohttp.ClientSession() as session:
...         return await client.fetch_document(session, "https://example.org/data/openings.json")
>>> # To actually run:
>>> # import asyncio; asyncio.run(main())
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import aiohttp

from site_widgets.config import DEFAULT_REQUEST_TIMEOUT
from site_widgets.exceptions import DataLoadError

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class SiteDataClient:
    r"""Fetch and decode one JSON dataset.

    Parameters
    ----------
    request_timeout : int, optional
        Total timeout in seconds for a single HTTP request.

    Notes
    -----
    The session is injected and never closed here, so the loader can share
    one session across the three concurrent fetches.
    """

    def __init__(self, request_timeout: int = DEFAULT_REQUEST_TIMEOUT) -> None:
        self.request_timeout = request_timeout

    async def fetch_text(self, session: aiohttp.ClientSession, source: str) -> str:
        """Return the raw body of ``source``.

        Raises
        ------
        DataLoadError
            On network errors, timeouts, non-200 responses or unreadable files.
        """
        if not is_remote(source):
            try:
                return await asyncio.to_thread(
                    Path(source).read_text, encoding="utf-8"
                )
            except OSError as err:
                raise DataLoadError(
                    f"Could not read {source}",
                    context={"source": source, "error": str(err)},
                    transient=False,
                ) from err
        try:
            async with session.get(
                source,
                timeout=aiohttp.ClientTimeout(total=self.request_timeout),
            ) as response:
                status = response.status
                text = await response.text()
        except aiohttp.ClientError as err:
            raise DataLoadError(
                f"Request to {source} failed",
                context={"source": source, "error_type": "ClientError"},
            ) from err
        except TimeoutError as err:
            raise DataLoadError(
                f"Request to {source} timed out",
                context={"source": source, "error_type": "TimeoutError"},
            ) from err
        if status != 200:
            raise DataLoadError(
                f"Request to {source} returned HTTP {status}",
                context={"source": source, "status_code": status},
                transient=status >= 500,
            )
        return text

    async def fetch_document(
        self, session: aiohttp.ClientSession, source: str
    ) -> Any:
        """Fetch ``source`` and decode it as JSON.

        Raises
        ------
        DataLoadError
            If the fetch fails or the body is not valid JSON.
        """
        text = await self.fetch_text(session, source)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as err:
            raise DataLoadError(
                f"Invalid JSON in {source}",
                context={"source": source, "error": str(err)},
                transient=False,
            ) from err
        logger.debug("Fetched %s", source)
        return document
