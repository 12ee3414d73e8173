"""Tests for the enrollment steps and testimonials renderers."""

from bs4 import BeautifulSoup

from site_widgets.pipeline.widget_renderer import (
    HostDocument,
    RenderOutcome,
    build_process_steps_markup,
    build_testimonials_markup,
    render_process_steps,
    render_testimonials,
)

PAGE = (
    "<html><head></head><body>"
    '<section id="enrollment-process">placeholder</section>'
    '<div class="testimonials-carousel">placeholder</div>'
    "</body></html>"
)


def test_process_steps_in_order(context):
    soup = BeautifulSoup(build_process_steps_markup(context), "html.parser")
    steps = soup.select(".process > .process__step")
    assert len(steps) == 2
    assert [s.select_one(".process__number").get_text() for s in steps] == ["1", "2"]
    assert [s.select_one("h4.process__title").get_text() for s in steps] == ["Tour", "Apply"]
    assert steps[1].select_one("p.process__text").get_text() == "Send the form."


def test_render_process_steps(context):
    document = HostDocument.from_html(PAGE)
    result = render_process_steps(document, context)
    assert result.outcome is RenderOutcome.RENDERED
    assert result.target == "#enrollment-process"
    assert "placeholder" not in document.inner_html("#enrollment-process")


def test_absent_steps_leave_container_untouched(make_context, config_doc, openings_doc):
    context = make_context(config_doc, openings_doc, {"testimonials": []})
    assert build_process_steps_markup(context) is None
    document = HostDocument.from_html(PAGE)
    result = render_process_steps(document, context)
    assert result.outcome is RenderOutcome.SKIPPED_NO_DATA
    assert document.inner_html("#enrollment-process") == "placeholder"


def test_process_steps_missing_container(context):
    document = HostDocument.from_html("<html><body></body></html>")
    result = render_process_steps(document, context)
    assert result.outcome is RenderOutcome.SKIPPED_MISSING_CONTAINER


def test_testimonials_markup(context):
    soup = BeautifulSoup(build_testimonials_markup(context), "html.parser")
    block = soup.select_one(".testimonial")
    assert block.select_one("blockquote.testimonial__quote").get_text() == "Wonderful."
    assert block.select_one(".testimonial__author").get_text() == "Sam"
    assert block.select_one(".testimonial__details").get_text() == "Parent"


def test_render_testimonials_into_carousel(context):
    document = HostDocument.from_html(PAGE)
    result = render_testimonials(document, context)
    assert result.rendered
    assert result.target == ".testimonials-carousel"
    assert "Wonderful." in document.inner_html(".testimonials-carousel")


def test_testimonials_absent(make_context, config_doc, openings_doc):
    context = make_context(config_doc, openings_doc, {})
    document = HostDocument.from_html(PAGE)
    result = render_testimonials(document, context)
    assert result.outcome is RenderOutcome.SKIPPED_NO_DATA


def test_not_loaded_context_is_skipped():
    document = HostDocument.from_html(PAGE)
    assert render_testimonials(document, None).outcome is RenderOutcome.SKIPPED_NO_DATA
    assert render_process_steps(document, None).outcome is RenderOutcome.SKIPPED_NO_DATA
