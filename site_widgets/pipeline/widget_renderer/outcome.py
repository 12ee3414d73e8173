"""Structured render outcomes shared by every widget renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from site_widgets.pipeline.data_loader.models import SiteContext

from .document import HostDocument


class RenderOutcome(str, Enum):
    RENDERED = "rendered"
    SKIPPED_MISSING_CONTAINER = "skipped-missing-container"
    SKIPPED_NO_DATA = "skipped-no-data"


@dataclass(frozen=True)
class RenderResult:
    """What a renderer did to its target, and the markup it wrote if any."""

    outcome: RenderOutcome
    target: str
    markup: str | None = None

    @property
    def rendered(self) -> bool:
        return self.outcome is RenderOutcome.RENDERED


def mount(
    document: HostDocument,
    context: SiteContext | None,
    selector: str,
    build: Callable[[SiteContext], str | None],
) -> RenderResult:
    """Replace the content of ``selector`` with ``build(context)``.

    The missing-container and not-loaded cases are reported, never raised;
    ``build`` returning ``None`` means it had nothing to render.
    """
    if not document.has_target(selector):
        return RenderResult(RenderOutcome.SKIPPED_MISSING_CONTAINER, selector)
    if context is None:
        return RenderResult(RenderOutcome.SKIPPED_NO_DATA, selector)
    markup = build(context)
    if markup is None:
        return RenderResult(RenderOutcome.SKIPPED_NO_DATA, selector)
    document.set_inner_html(selector, markup)
    return RenderResult(RenderOutcome.RENDERED, selector, markup)
