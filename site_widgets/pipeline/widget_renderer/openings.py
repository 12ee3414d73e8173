"""Current-openings widgets.

Two views over the same openings data:

- the openings panel (``render_openings``): one section per location with
  openings, one row per configured program that has an opening there, and a
  single page-level "Updated" stamp. ``summary`` mode shows name, age range
  and status badge; ``full`` mode adds the explanatory note when present.
- the badge strip (``render_openings_badges``): compact "Program: Status"
  badges for a single location.

Both are pure functions of the loaded context and their parameters; the
``build_*`` helpers return markup, the ``render_*`` wrappers write it into a
host document container and report a :class:`RenderResult`.

Example
-------
>>> markup = build_openings_markup(context, "summary")  # doctest: +SKIP
>>> render_openings(document, context, "openings-home", "summary").rendered  # doctest: +SKIP
True
"""

from __future__ import annotations

from html import escape

from site_widgets.config import MODE_FULL, MODE_SUMMARY, OPENINGS_TITLE
from site_widgets.pipeline.data_loader.models import Location, SiteContext

from .document import HostDocument, container_selector
from .outcome import RenderResult, mount
from .resolver import iter_program_openings, resolve_location_openings

OPENINGS_MODES: tuple[str, ...] = (MODE_SUMMARY, MODE_FULL)


def _working_set(
    context: SiteContext, location_filter: str | None
) -> list[tuple[str, Location]]:
    locations = context.site_config.locations
    if not location_filter:
        return list(locations.items())
    location = locations.get(location_filter)
    if location is None:
        return []
    return [(location_filter, location)]


def build_openings_markup(
    context: SiteContext, mode: str = MODE_SUMMARY, location_filter: str | None = None
) -> str:
    """Build the openings panel markup.

    Parameters
    ----------
    context : SiteContext
        Loaded datasets.
    mode : str, optional
        ``"summary"`` or ``"full"``; full adds note lines.
    location_filter : str or None, optional
        Render only this configured location key. An unrecognized key gives
        a panel with no location sections.

    Returns
    -------
    str
        The panel markup. Identical inputs always give identical output.

    Raises
    ------
    ValueError
        If ``mode`` is not a known rendering mode.
    """
    if mode not in OPENINGS_MODES:
        raise ValueError(f"Unknown openings mode: {mode!r}")
    parts = [
        '<div class="openings">',
        '<div class="openings__header">',
        f'<h3 class="openings__title">{OPENINGS_TITLE}</h3>',
        f'<span class="openings__updated">Updated {escape(context.openings.last_updated)}</span>',
        "</div>",
    ]
    for location_key, location in _working_set(context, location_filter):
        resolved = resolve_location_openings(context, location_key)
        rows = list(iter_program_openings(context, resolved.openings))
        # No displayable opening: omit the whole section, header included.
        if not rows:
            continue
        parts.append('<div class="openings__location">')
        parts.append(
            f'<h4 class="openings__location-name">{escape(location.name)}</h4>'
        )
        parts.append('<div class="openings__list">')
        for _key, program, opening in rows:
            parts.append('<div class="openings__item">')
            parts.append('<div class="openings__program">')
            parts.append(
                f'<span class="openings__program-name">{escape(program.name)} '
                f"({escape(program.age_range)})</span>"
            )
            parts.append(
                f'<span class="badge {opening.badge_color.css_class}">'
                f"{escape(opening.status_text)}</span>"
            )
            parts.append("</div>")
            if mode == MODE_FULL and opening.note:
                parts.append(f'<p class="openings__note">{escape(opening.note)}</p>')
            parts.append("</div>")
        parts.append("</div>")
        parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def render_openings(
    document: HostDocument,
    context: SiteContext | None,
    container_id: str,
    mode: str = MODE_SUMMARY,
    location_filter: str | None = None,
) -> RenderResult:
    """Render the openings panel into ``container_id``."""
    return mount(
        document,
        context,
        container_selector(container_id),
        lambda ctx: build_openings_markup(ctx, mode, location_filter),
    )


def build_badges_markup(context: SiteContext, location_key: str) -> str | None:
    """Build the compact badge strip for one location.

    Returns ``None`` when no configured program has an opening there.
    """
    resolved = resolve_location_openings(context, location_key)
    rows = list(iter_program_openings(context, resolved.openings))
    if not rows:
        return None
    badges = [
        f'<span class="badge {opening.badge_color.css_class}">'
        f"{escape(program.name)}: {escape(opening.status_text)}</span>"
        for _key, program, opening in rows
    ]
    return '<div class="flex flex-wrap gap-2">' + "".join(badges) + "</div>"


def render_openings_badges(
    document: HostDocument,
    context: SiteContext | None,
    container_id: str,
    location_key: str,
) -> RenderResult:
    """Render the badge strip for ``location_key`` into ``container_id``."""
    return mount(
        document,
        context,
        container_selector(container_id),
        lambda ctx: build_badges_markup(ctx, location_key),
    )
