"""Widget renderer package.

Turns a loaded :class:`~site_widgets.pipeline.data_loader.SiteContext` into
HTML fragments inside a host document: the openings panel and badge strip,
the enrollment process steps, testimonials, and per-location schema.org
structured data. Every renderer returns a :class:`RenderResult` describing
whether it rendered or why it skipped.

Usage
-----
>>> from site_widgets.pipeline.widget_renderer import HostDocument, render_openings
>>> doc = HostDocument.from_file(Path("templates/index.html"))  # doctest: +SKIP
>>> render_openings(doc, context, "openings-home", "summary")  # doctest: +SKIP
"""

from .content import (
    build_process_steps_markup,
    build_testimonials_markup,
    render_process_steps,
    render_testimonials,
)
from .document import HostDocument, container_selector
from .openings import (
    build_badges_markup,
    build_openings_markup,
    render_openings,
    render_openings_badges,
)
from .outcome import RenderOutcome, RenderResult
from .resolver import ResolvedOpenings, iter_program_openings, resolve_location_openings
from .runner import render_page, run_from_config
from .structured_data import (
    build_location_schema,
    build_structured_data,
    inject_structured_data,
    serialize_structured_data,
)

__all__ = [
    "HostDocument",
    "RenderOutcome",
    "RenderResult",
    "ResolvedOpenings",
    "build_badges_markup",
    "build_location_schema",
    "build_openings_markup",
    "build_process_steps_markup",
    "build_structured_data",
    "build_testimonials_markup",
    "container_selector",
    "inject_structured_data",
    "iter_program_openings",
    "render_openings",
    "render_openings_badges",
    "render_page",
    "render_process_steps",
    "render_testimonials",
    "resolve_location_openings",
    "run_from_config",
    "serialize_structured_data",
]
