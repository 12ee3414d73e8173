"""The data_loader package turns the three site datasets into one loaded context.

It encapsulates the asynchronous fetch client, the environment-backed
settings, the typed dataset records and the all-or-nothing loader. Renderers
only ever see the resulting :class:`SiteContext`.

Modules exported
----------------
SiteDataClient
    Fetches and decodes one JSON dataset (HTTP via aiohttp, or a local file).
SiteDataLoader, load_site_context
    Concurrent three-way load with a single success/failure outcome.
SiteDataSettings, DataSources
    Where the datasets live and how long a fetch may take.
SiteContext and the dataset records
    Frozen, read-only views of configuration, openings and content.
"""

from __future__ import annotations

from .client import SiteDataClient
from .keys import LocationKeyMap, storage_key_for
from .loader import SiteDataLoader, load_site_context
from .models import (
    Address,
    BadgeColor,
    ContentData,
    EnrollmentStep,
    Location,
    Opening,
    OpeningsData,
    Program,
    SiteConfig,
    SiteContext,
    Testimonial,
    parse_content,
    parse_openings,
    parse_site_config,
)
from .settings import DataSources, SiteDataSettings

__all__ = [
    "Address",
    "BadgeColor",
    "ContentData",
    "DataSources",
    "EnrollmentStep",
    "Location",
    "LocationKeyMap",
    "Opening",
    "OpeningsData",
    "Program",
    "SiteConfig",
    "SiteContext",
    "SiteDataClient",
    "SiteDataLoader",
    "SiteDataSettings",
    "Testimonial",
    "load_site_context",
    "parse_content",
    "parse_openings",
    "parse_site_config",
    "storage_key_for",
]
