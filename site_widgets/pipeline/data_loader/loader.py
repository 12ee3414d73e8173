"""Concurrent, all-or-nothing loading of the three site datasets.

``load_site_context`` issues the configuration, openings and content fetches
concurrently, waits for all three, and only then parses them into a
:class:`SiteContext`. Any single failure fails the whole load.

``SiteDataLoader`` wraps that in the startup gate used by the runner: it
holds the currently committed context, replaces it only on a complete
success, and reports failures by logging once and returning ``False``.

Examples
--------
>>> from site_widgets.pipeline.data_loader import DataSources, SiteDataLoader
>>> loader = SiteDataLoader(DataSources.from_base("data"))
>>> # ok = asyncio.run(loader.load())
>>> # loader.context is None when the load failed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from site_widgets.config import DEFAULT_REQUEST_TIMEOUT
from site_widgets.exceptions import DataLoadError, DataValidationError

from .client import SiteDataClient
from .models import SiteContext, parse_content, parse_openings, parse_site_config
from .settings import DataSources

logger = logging.getLogger(__name__)


async def _fetch_all(
    session: aiohttp.ClientSession, client: SiteDataClient, sources: DataSources
) -> list[Any]:
    results = await asyncio.gather(
        client.fetch_document(session, sources.site_config),
        client.fetch_document(session, sources.openings),
        client.fetch_document(session, sources.content),
        return_exceptions=True,
    )
    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        first = failures[0]
        if isinstance(first, DataLoadError):
            raise first
        raise DataLoadError(
            "Unexpected error while fetching site data",
            context={"error": repr(first), "failures": len(failures)},
            transient=False,
        ) from first
    return list(results)


async def load_site_context(
    sources: DataSources,
    session: aiohttp.ClientSession | None = None,
    client: SiteDataClient | None = None,
) -> SiteContext:
    """Fetch and parse the three datasets as one unit.

    Parameters
    ----------
    sources : DataSources
        Locations of the configuration, openings and content documents.
    session : aiohttp.ClientSession or None, optional
        Session to use for HTTP sources. When ``None`` a session is opened
        for the duration of the join and closed afterwards.
    client : SiteDataClient or None, optional
        Fetch client; defaults to one with the configured request timeout.

    Returns
    -------
    SiteContext
        The immutable context bundling all three datasets.

    Raises
    ------
    DataLoadError
        If any fetch fails or any document does not parse.
    """
    client = client or SiteDataClient(DEFAULT_REQUEST_TIMEOUT)
    if session is None:
        async with aiohttp.ClientSession() as owned:
            config_doc, openings_doc, content_doc = await _fetch_all(
                owned, client, sources
            )
    else:
        config_doc, openings_doc, content_doc = await _fetch_all(
            session, client, sources
        )
    try:
        return SiteContext.create(
            site_config=parse_site_config(config_doc),
            openings=parse_openings(openings_doc),
            content=parse_content(content_doc),
        )
    except DataValidationError as err:
        raise DataLoadError(
            f"Site data failed validation: {err.message}",
            context=err.context,
            transient=False,
        ) from err


class SiteDataLoader:
    """Startup gate holding the committed :class:`SiteContext`.

    Parameters
    ----------
    sources : DataSources
        Where the three datasets live.
    client : SiteDataClient or None, optional
        Fetch client; injected by tests.
    """

    def __init__(
        self, sources: DataSources, client: SiteDataClient | None = None
    ) -> None:
        self.sources = sources
        self.client = client or SiteDataClient(DEFAULT_REQUEST_TIMEOUT)
        self._context: SiteContext | None = None

    @property
    def context(self) -> SiteContext | None:
        return self._context

    @property
    def ready(self) -> bool:
        return self._context is not None

    async def load(self, session: aiohttp.ClientSession | None = None) -> bool:
        """Load all datasets; commit only if every one succeeded.

        Returns
        -------
        bool
            ``True`` when a new context was committed. On failure the error
            is logged once and any previously committed context is kept.
        """
        try:
            context = await load_site_context(
                self.sources, session=session, client=self.client
            )
        except DataLoadError as err:
            logger.error(
                "Error loading site data: %s", err, extra={"app_error": err.to_dict()}
            )
            return False
        self._context = context
        logger.info(
            "Loaded site data: %d locations, %d programs, %d openings buckets",
            len(context.site_config.locations),
            len(context.site_config.programs),
            len(context.openings.buckets),
        )
        return True
