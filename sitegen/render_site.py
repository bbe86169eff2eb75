"""Rendering of every registered page."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sitegen.page_registry import PageRegistry
from sitegen.render_page import render_page
from sitegen.site_templates import SiteTemplates

logger = logging.getLogger(__name__)


@dataclass
class RenderSummary:
    """Outcome of the render pass."""

    rendered: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)


def render_site(registry: PageRegistry, templates: SiteTemplates) -> RenderSummary:
    """Render all pages; one failing page never stops the others."""
    summary = RenderSummary()
    for page in registry:
        if render_page(page, templates):
            summary.rendered.append(page.output_path)
        else:
            summary.failed.append(page.output_path)
    logger.info(
        "Rendered %d pages (%d failed)", len(summary.rendered), len(summary.failed)
    )
    return summary
