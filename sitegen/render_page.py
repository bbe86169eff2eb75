"""Third pass: render a single page to its output file."""

import logging
from typing import Any

from jinja2 import Template, TemplateError
from markupsafe import Markup

from sitegen.page import Page
from sitegen.page_kind import PageKind
from sitegen.site_templates import SiteTemplates

logger = logging.getLogger(__name__)


def page_context(page: Page, templates: SiteTemplates, footer: str = "") -> dict[str, Any]:
    """Build the template context for a page."""
    return {
        "page": page,
        "name": page.display_name,
        "content": Markup(page.body),
        "backlinks": page.sorted_backlinks(),
        "navigation": templates.navigation,
        "static_imports": templates.static_imports,
        "footer": Markup(footer),
    }


def _layout_for(page: Page, templates: SiteTemplates) -> Template:
    if page.kind is PageKind.MARKDOWN:
        return templates.markdown
    if page.kind is PageKind.TEMPLATED_HTML:
        source = page.source_path.read_text(encoding="utf-8")
        return templates.environment.from_string(source)
    msg = f"Opaque file {page.source_path} cannot be rendered"
    raise ValueError(msg)


def render_page(page: Page, templates: SiteTemplates) -> bool:
    """Render a page and write it to its output path.

    Returns False when the page was skipped because of an error.
    """
    try:
        footer = templates.footer.render(page_context(page, templates))
        layout = _layout_for(page, templates)
        html = layout.render(page_context(page, templates, footer))
    except TemplateError as e:
        logger.error("Unable to render %s: %s", page.source_path, e)
        return False
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to open source file %s: %s", page.source_path, e)
        return False

    try:
        page.output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        logger.error("Unable to create file %s: %s", page.output_path, e)
        return False

    logger.debug("Rendered file %s", page.output_path)
    return True
