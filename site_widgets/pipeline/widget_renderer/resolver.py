"""Location openings lookup.

Given a display location key, return the sparse program -> opening mapping
stored for it, going through the context's canonical key map. Unknown keys
and missing buckets produce an empty, typed "no data" result.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from site_widgets.pipeline.data_loader.models import Opening, Program, SiteContext

NO_OPENINGS: Mapping[str, Opening] = MappingProxyType({})


@dataclass(frozen=True)
class ResolvedOpenings:
    location_key: str
    storage_key: str | None = None
    openings: Mapping[str, Opening] = field(default_factory=lambda: NO_OPENINGS)

    @property
    def has_data(self) -> bool:
        return bool(self.openings)


def resolve_location_openings(
    context: SiteContext, location_key: str
) -> ResolvedOpenings:
    """Return the openings stored for ``location_key``.

    Examples
    --------
    >>> resolved = resolve_location_openings(context, "nowhere")  # doctest: +SKIP
    >>> resolved.has_data  # doctest: +SKIP
    False
    """
    storage_key = context.key_map.storage_key(location_key)
    if storage_key is None:
        return ResolvedOpenings(location_key)
    openings = context.openings.buckets.get(storage_key)
    if not openings:
        return ResolvedOpenings(location_key, storage_key)
    return ResolvedOpenings(location_key, storage_key, openings)


def iter_program_openings(
    context: SiteContext, openings: Mapping[str, Opening]
) -> Iterator[tuple[str, Program, Opening]]:
    """Yield ``(program_key, program, opening)`` in configured program order.

    Programs with no opening are skipped, and so are openings for programs
    the configuration does not know.
    """
    for program_key, program in context.site_config.programs.items():
        opening = openings.get(program_key)
        if opening is None:
            continue
        yield program_key, program, opening
