"""Render every widget of the site page from the loaded datasets.

This module provides the headless page runner: it loads the three datasets
once, renders each widget of the page plan into the host template, injects
the structured data, and writes the finished HTML. It is intended for
programmatic invocation and is wrapped by ``site_widgets.render_site``.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from site_widgets.pipeline.widget_renderer.runner import run_from_config
    result = run_from_config()
    assert result is True

Explicit path usage::

    from pathlib import Path
    from site_widgets.pipeline.widget_renderer.runner import run_from_config

    run_from_config(
        template_path=Path("templates/index.html"),
        output_file=Path("public/index.html"),
        data_base="https://beginningsschools.org/data",
    )
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from site_widgets.config import (
    ENROLLMENT_PROCESS_CONTAINER,
    OUTPUT_HTML_FILE,
    PAGE_OPENINGS_WIDGETS,
    TEMPLATE_PATH,
    TESTIMONIALS_SELECTOR,
)
from site_widgets.pipeline.data_loader import (
    DataSources,
    SiteContext,
    SiteDataClient,
    SiteDataLoader,
    SiteDataSettings,
)

from .content import render_process_steps, render_testimonials
from .document import HostDocument
from .openings import render_openings
from .outcome import RenderResult
from .structured_data import inject_structured_data

logger = logging.getLogger(__name__)


def render_page(
    document: HostDocument, context: SiteContext | None, site_url: str
) -> list[RenderResult]:
    """Render the full page plan into ``document``.

    Every widget is attempted; missing containers and missing data are
    reported in the returned results rather than raised.
    """
    results = [
        render_openings(document, context, container_id, mode, location_filter)
        for container_id, mode, location_filter in PAGE_OPENINGS_WIDGETS
    ]
    results.append(
        render_process_steps(document, context, ENROLLMENT_PROCESS_CONTAINER)
    )
    results.append(render_testimonials(document, context, TESTIMONIALS_SELECTOR))
    results.append(inject_structured_data(document, context, site_url))
    for result in results:
        logger.debug("%s: %s", result.target, result.outcome.value)
    return results


def write_html_output(html_content: str, output_file: Path) -> None:
    """Write the rendered HTML to disk, creating parent directories."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html_content, encoding="utf-8")


def run_from_config(
    template_path: Path | None = None,
    output_file: Path | None = None,
    data_base: str | None = None,
    site_url: str | None = None,
) -> bool:
    """Load the site data, render the page and write it to ``output_file``.

    If any argument is ``None``, project-level defaults from
    ``site_widgets.config`` and the environment settings are used.

    Parameters
    ----------
    template_path : pathlib.Path or None, optional
        Host HTML template with the widget containers.
    output_file : pathlib.Path or None, optional
        Destination for the rendered page.
    data_base : str or None, optional
        Base URL or directory of the three datasets.
    site_url : str or None, optional
        Public site root used for structured-data URLs.

    Returns
    -------
    bool
        ``True`` when the data loaded and the page was written. ``False``
        when loading failed (the template is still written with its
        containers left untouched) or when any other error occurred; all
        errors are logged.
    """
    try:
        settings = SiteDataSettings()
        template_path = (
            Path(template_path) if template_path is not None else TEMPLATE_PATH
        )
        output_file = Path(output_file) if output_file is not None else OUTPUT_HTML_FILE
        sources = DataSources.from_base(data_base or settings.data_base)
        loader = SiteDataLoader(sources, SiteDataClient(settings.request_timeout))
        loaded = asyncio.run(loader.load())
        document = HostDocument.from_file(template_path)
        results = render_page(document, loader.context, site_url or settings.site_url)
        write_html_output(document.to_html(), output_file)
        rendered = sum(1 for result in results if result.rendered)
        logger.info(
            "Rendered %d of %d widgets into %s", rendered, len(results), output_file
        )
        return loaded
    except Exception:
        logger.exception("Failed to render site page")
        return False


__all__ = ["render_page", "run_from_config", "write_html_output"]
