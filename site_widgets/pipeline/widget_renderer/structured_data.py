"""schema.org structured data for each configured location.

Every location becomes one independent ``ChildCare`` JSON-LD document with
its address, contact details, canonical URL and the fixed descriptive
metadata (hours, price tier, service area, accreditation). Each document is
serialized so it can be embedded verbatim in a
``<script type="application/ld+json">`` block, then appended to the host
document's ``<head>``, one script per location in configuration order.

Example
-------
>>> schema = build_location_schema(location, "https://beginningsschools.org")  # doctest: +SKIP
>>> schema["url"]  # doctest: +SKIP
'https://beginningsschools.org/locations/queen-anne'
"""

from __future__ import annotations

import json
from typing import Any

from site_widgets.config import (
    DEFAULT_SITE_URL,
    LOCATION_URL_FORMAT,
    SCHEMA_ADDRESS_COUNTRY,
    SCHEMA_AREA_SERVED,
    SCHEMA_BUSINESS_TYPE,
    SCHEMA_CONTEXT,
    SCHEMA_CREDENTIAL,
    SCHEMA_OPENING_HOURS,
    SCHEMA_PRICE_RANGE,
    STRUCTURED_DATA_SCRIPT_TYPE,
)
from site_widgets.pipeline.data_loader.models import Location, SiteContext

from .document import HostDocument
from .outcome import RenderOutcome, RenderResult

HEAD_TARGET = "head"
SCRIPT_KEY_PREFIX = "structured-data:"
SCRIPT_KEY_FORMAT = SCRIPT_KEY_PREFIX + "{location_key}"

# Characters that could end the script element or confuse HTML parsers.
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def build_location_schema(
    location: Location, site_url: str = DEFAULT_SITE_URL
) -> dict[str, Any]:
    address = location.address
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": SCHEMA_BUSINESS_TYPE,
        "name": location.full_name,
        "description": location.description,
        "address": {
            "@type": "PostalAddress",
            "streetAddress": address.street,
            "addressLocality": address.city,
            "addressRegion": address.state,
            "postalCode": address.zip,
            "addressCountry": SCHEMA_ADDRESS_COUNTRY,
        },
        "telephone": location.phone,
        "email": location.email,
        "url": LOCATION_URL_FORMAT.format(
            site_url=site_url.rstrip("/"), location_id=location.id
        ),
        "openingHours": SCHEMA_OPENING_HOURS,
        "priceRange": SCHEMA_PRICE_RANGE,
        "areaServed": {"@type": "City", "name": SCHEMA_AREA_SERVED},
        "hasCredential": {
            "@type": "EducationalOccupationalCredential",
            "credentialCategory": SCHEMA_CREDENTIAL,
        },
    }


def serialize_structured_data(schema: dict[str, Any]) -> str:
    """Serialize ``schema`` as compact JSON that is safe inside a script tag.

    Examples
    --------
    >>> serialize_structured_data({"name": "</script>"})
    '{"name":"\\\\u003c/script\\\\u003e"}'
    """
    text = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))
    return text.translate(_SCRIPT_ESCAPES)


def build_structured_data(
    context: SiteContext, site_url: str = DEFAULT_SITE_URL
) -> list[tuple[str, str]]:
    """Return ``(location_key, serialized_document)`` per configured location."""
    return [
        (key, serialize_structured_data(build_location_schema(location, site_url)))
        for key, location in context.site_config.locations.items()
    ]


def inject_structured_data(
    document: HostDocument,
    context: SiteContext | None,
    site_url: str = DEFAULT_SITE_URL,
) -> RenderResult:
    """Append one JSON-LD script per location to the document head.

    Skips, without raising, when the configuration is not loaded or lists
    no locations. Scripts written by an earlier call are replaced, and those
    for locations no longer configured are removed.
    """
    if context is None:
        return RenderResult(RenderOutcome.SKIPPED_NO_DATA, HEAD_TARGET)
    documents = build_structured_data(context, site_url)
    document.remove_head_scripts(
        SCRIPT_KEY_PREFIX,
        keep={SCRIPT_KEY_FORMAT.format(location_key=key) for key, _text in documents},
    )
    if not documents:
        return RenderResult(RenderOutcome.SKIPPED_NO_DATA, HEAD_TARGET)
    for location_key, text in documents:
        document.append_head_script(
            text,
            STRUCTURED_DATA_SCRIPT_TYPE,
            SCRIPT_KEY_FORMAT.format(location_key=location_key),
        )
    return RenderResult(
        RenderOutcome.RENDERED,
        HEAD_TARGET,
        "\n".join(text for _key, text in documents),
    )
