"""Canonical storage-key mapping for location openings.

The openings dataset stores each location's availability under one of a
fixed set of canonical storage buckets, which need not match the key a
location uses in the site configuration. This module owns that mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from site_widgets.config import LOCATION_STORAGE_KEYS

logger = logging.getLogger(__name__)

STORAGE_BUCKETS: frozenset[str] = frozenset(LOCATION_STORAGE_KEYS.values())


def storage_key_for(location_key: str | None) -> str | None:
    """Return the canonical storage bucket for a display location key.

    Unknown keys (including ``None``) map to ``None`` rather than raising.

    Examples
    --------
    >>> storage_key_for("queen-anne")
    'queenAnne'
    >>> storage_key_for("ballard") is None
    True
    """
    if not location_key:
        return None
    return LOCATION_STORAGE_KEYS.get(location_key)


@dataclass(frozen=True)
class LocationKeyMap:
    """Resolved display-key to storage-bucket mapping for one loaded site.

    Built once when the datasets are loaded. Lookups are total: a key the map
    has never seen falls back to :func:`storage_key_for`, which returns
    ``None`` for anything outside the recognized buckets.
    """

    buckets: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls, location_keys: Iterable[str], bucket_keys: Iterable[str]
    ) -> LocationKeyMap:
        """Map every configured location key and report mismatches.

        Parameters
        ----------
        location_keys : Iterable[str]
            Keys of ``SiteConfig.locations``.
        bucket_keys : Iterable[str]
            Storage buckets present in the openings dataset.

        Returns
        -------
        LocationKeyMap
            The validated mapping. Mismatches are logged as warnings only;
            a location without openings is a normal state.
        """
        mapping: dict[str, str | None] = {}
        for key in location_keys:
            bucket = storage_key_for(key)
            if bucket is None:
                logger.warning(
                    "Location %r has no recognized openings bucket", key
                )
            mapping[key] = bucket
        reached = {bucket for bucket in mapping.values() if bucket is not None}
        for bucket in bucket_keys:
            if bucket not in STORAGE_BUCKETS:
                logger.warning("Openings bucket %r is not a known bucket", bucket)
            elif bucket not in reached:
                logger.warning(
                    "Openings bucket %r is not used by any configured location",
                    bucket,
                )
        return cls(buckets=MappingProxyType(mapping))

    def storage_key(self, location_key: str | None) -> str | None:
        if location_key is None:
            return None
        if location_key in self.buckets:
            return self.buckets[location_key]
        return storage_key_for(location_key)
