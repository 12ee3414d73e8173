"""Typed, read-only records for the three site datasets.

The site is driven by three independently maintained JSON documents:

- ``site-config.json``: locations and programs,
- ``openings.json``: per-location enrollment availability,
- ``content.json``: testimonials and enrollment steps.

Each document is parsed into frozen dataclasses here, and the three results
are bundled into a :class:`SiteContext`, the single value every renderer
receives. Mappings are wrapped in ``MappingProxyType`` and sequences are
tuples so a loaded context cannot be mutated in place.

Parsing never reformats values: dates, phone numbers and addresses are
kept as the strings found in the source documents.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from site_widgets.config import (
    BADGE_CLASS_FORMAT,
    DEFAULT_BADGE_COLOR,
    OPENINGS_LAST_UPDATED_KEY,
    OPENINGS_METADATA_PREFIX,
)
from site_widgets.exceptions import DataValidationError

from .keys import LocationKeyMap


class BadgeColor(str, Enum):
    """Known badge colors; anything else resolves to ``GRAY``."""

    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    BLUE = "blue"
    GRAY = "gray"

    @classmethod
    def resolve(cls, value: Any) -> BadgeColor:
        """Return the matching color, or the default for missing/unknown tags.

        Examples
        --------
        >>> BadgeColor.resolve("green")
        <BadgeColor.GREEN: 'green'>
        >>> BadgeColor.resolve(None)
        <BadgeColor.GRAY: 'gray'>
        >>> BadgeColor.resolve("chartreuse")
        <BadgeColor.GRAY: 'gray'>
        """
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls(DEFAULT_BADGE_COLOR)

    @property
    def css_class(self) -> str:
        return BADGE_CLASS_FORMAT.format(color=self.value)


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    full_name: str = ""
    description: str = ""
    address: Address = field(default_factory=Address)
    phone: str = ""
    email: str = ""


@dataclass(frozen=True)
class Program:
    name: str
    age_range: str = ""


@dataclass(frozen=True)
class Opening:
    status_text: str
    badge_color: BadgeColor = BadgeColor.GRAY
    note: str | None = None


@dataclass(frozen=True)
class Testimonial:
    quote: str
    author: str = ""
    details: str = ""


@dataclass(frozen=True)
class EnrollmentStep:
    number: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class SiteConfig:
    """Configured locations and programs.

    ``programs`` keeps document order, which is the display order of every
    program listing.
    """

    locations: Mapping[str, Location]
    programs: Mapping[str, Program]


@dataclass(frozen=True)
class OpeningsData:
    """The opaque last-updated stamp plus sparse openings per storage bucket."""

    last_updated: str
    buckets: Mapping[str, Mapping[str, Opening]]


@dataclass(frozen=True)
class ContentData:
    """Static marketing content; ``None`` marks a section absent from the source."""

    testimonials: tuple[Testimonial, ...] | None = None
    steps: tuple[EnrollmentStep, ...] | None = None


@dataclass(frozen=True)
class SiteContext:
    """The loaded, immutable view of all three datasets."""

    site_config: SiteConfig
    openings: OpeningsData
    content: ContentData
    key_map: LocationKeyMap = field(default_factory=LocationKeyMap)

    @classmethod
    def create(
        cls, site_config: SiteConfig, openings: OpeningsData, content: ContentData
    ) -> SiteContext:
        """Bundle parsed datasets and validate the location key mapping."""
        key_map = LocationKeyMap.build(
            site_config.locations.keys(), openings.buckets.keys()
        )
        return cls(
            site_config=site_config,
            openings=openings,
            content=content,
            key_map=key_map,
        )


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DataValidationError(
            f"{what} must be a JSON object",
            context={"type": type(value).__name__},
        )
    return value


def _text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    return str(value)


def _parse_location(key: str, raw: Any) -> Location:
    record = _require_mapping(raw, f"location {key!r}")
    address = _require_mapping(record.get("address") or {}, f"address of {key!r}")
    return Location(
        id=_text(record, "id") or key,
        name=_text(record, "name"),
        full_name=_text(record, "fullName"),
        description=_text(record, "description"),
        address=Address(
            street=_text(address, "street"),
            city=_text(address, "city"),
            state=_text(address, "state"),
            zip=_text(address, "zip"),
        ),
        phone=_text(record, "phone"),
        email=_text(record, "email"),
    )


def parse_site_config(document: Any) -> SiteConfig:
    """Parse ``site-config.json`` into a :class:`SiteConfig`.

    Raises
    ------
    DataValidationError
        If the document, ``locations`` or ``programs`` is not an object, or
        an entry inside them is not an object.
    """
    root = _require_mapping(document, "site configuration")
    locations_raw = _require_mapping(root.get("locations") or {}, "locations")
    programs_raw = _require_mapping(root.get("programs") or {}, "programs")
    locations = {
        key: _parse_location(key, raw) for key, raw in locations_raw.items()
    }
    programs: dict[str, Program] = {}
    for key, raw in programs_raw.items():
        record = _require_mapping(raw, f"program {key!r}")
        programs[key] = Program(
            name=_text(record, "name"), age_range=_text(record, "ageRange")
        )
    return SiteConfig(
        locations=MappingProxyType(locations),
        programs=MappingProxyType(programs),
    )


def _parse_opening(raw: Mapping[str, Any]) -> Opening:
    note = raw.get("note")
    return Opening(
        status_text=_text(raw, "statusText"),
        badge_color=BadgeColor.resolve(raw.get("badgeColor")),
        note=str(note) if note else None,
    )


def parse_openings(document: Any) -> OpeningsData:
    """Parse ``openings.json`` into an :class:`OpeningsData`.

    Top-level keys starting with ``_`` are metadata; every other key is a
    storage bucket mapping program keys to openings. ``null`` openings are
    treated as absent.

    Examples
    --------
    >>> data = parse_openings({
    ...     "_lastUpdated": "May 3",
    ...     "queenAnne": {"infant": {"statusText": "Open"}, "toddler": None},
    ... })
    >>> data.last_updated
    'May 3'
    >>> list(data.buckets["queenAnne"])
    ['infant']
    """
    root = _require_mapping(document, "openings")
    buckets: dict[str, Mapping[str, Opening]] = {}
    for bucket, raw in root.items():
        if bucket.startswith(OPENINGS_METADATA_PREFIX):
            continue
        if raw is None:
            continue
        entries = _require_mapping(raw, f"openings bucket {bucket!r}")
        openings: dict[str, Opening] = {}
        for program_key, opening in entries.items():
            if opening is None:
                continue
            openings[program_key] = _parse_opening(
                _require_mapping(opening, f"opening {bucket}.{program_key}")
            )
        buckets[bucket] = MappingProxyType(openings)
    return OpeningsData(
        last_updated=_text(root, OPENINGS_LAST_UPDATED_KEY),
        buckets=MappingProxyType(buckets),
    )


def parse_content(document: Any) -> ContentData:
    """Parse ``content.json`` into a :class:`ContentData`."""
    root = _require_mapping(document, "content")
    testimonials: tuple[Testimonial, ...] | None = None
    raw_testimonials = root.get("testimonials")
    if isinstance(raw_testimonials, list):
        testimonials = tuple(
            Testimonial(
                quote=_text(item, "quote"),
                author=_text(item, "author"),
                details=_text(item, "details"),
            )
            for item in (_require_mapping(t, "testimonial") for t in raw_testimonials)
        )
    steps: tuple[EnrollmentStep, ...] | None = None
    process = root.get("enrollmentProcess")
    if isinstance(process, Mapping) and isinstance(process.get("steps"), list):
        steps = tuple(
            EnrollmentStep(
                number=_text(item, "number"),
                title=_text(item, "title"),
                description=_text(item, "description"),
            )
            for item in (_require_mapping(s, "enrollment step") for s in process["steps"])
        )
    return ContentData(testimonials=testimonials, steps=steps)
