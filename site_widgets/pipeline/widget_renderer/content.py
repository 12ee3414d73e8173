"""Static content widgets: enrollment process steps and testimonials."""

from __future__ import annotations

from html import escape

from site_widgets.config import ENROLLMENT_PROCESS_CONTAINER, TESTIMONIALS_SELECTOR
from site_widgets.pipeline.data_loader.models import SiteContext

from .document import HostDocument, container_selector
from .outcome import RenderResult, mount


def build_process_steps_markup(context: SiteContext) -> str | None:
    """Build one step block per enrollment step, in dataset order.

    Returns ``None`` when the content dataset has no step list.
    """
    steps = context.content.steps
    if steps is None:
        return None
    parts = ['<div class="process">']
    for step in steps:
        parts.extend(
            [
                '<div class="process__step">',
                f'<div class="process__number">{escape(step.number)}</div>',
                '<div class="process__content">',
                f'<h4 class="process__title">{escape(step.title)}</h4>',
                f'<p class="process__text">{escape(step.description)}</p>',
                "</div>",
                "</div>",
            ]
        )
    parts.append("</div>")
    return "\n".join(parts)


def render_process_steps(
    document: HostDocument,
    context: SiteContext | None,
    container_id: str = ENROLLMENT_PROCESS_CONTAINER,
) -> RenderResult:
    return mount(
        document, context, container_selector(container_id), build_process_steps_markup
    )


def build_testimonials_markup(context: SiteContext) -> str | None:
    """Build one block per testimonial; ``None`` when there are none listed."""
    testimonials = context.content.testimonials
    if testimonials is None:
        return None
    parts: list[str] = []
    for testimonial in testimonials:
        parts.extend(
            [
                '<div class="testimonial">',
                f'<blockquote class="testimonial__quote">{escape(testimonial.quote)}</blockquote>',
                f'<p class="testimonial__author">{escape(testimonial.author)}</p>',
                f'<p class="testimonial__details">{escape(testimonial.details)}</p>',
                "</div>",
            ]
        )
    return "\n".join(parts)


def render_testimonials(
    document: HostDocument,
    context: SiteContext | None,
    selector: str = TESTIMONIALS_SELECTOR,
) -> RenderResult:
    return mount(document, context, selector, build_testimonials_markup)
