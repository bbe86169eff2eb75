"""Loading of the shared layout templates and partials."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from sitegen.build_errors import FatalBuildError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteTemplates:
    """Read-only layout pieces shared by every page."""

    environment: Environment
    navigation: Markup
    static_imports: Markup
    footer: Template
    markdown: Template


def create_environment(template_dir: Path) -> Environment:
    """Create the Jinja environment used for layouts and templated pages."""
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "htm"], default_for_string=True),
        keep_trailing_newline=True,
    )


def load_site_templates(config: dict[str, Any]) -> SiteTemplates:
    """Load partials and layouts once; any missing piece is fatal."""
    template_dir = Path(config["template_dir"])
    names = config["templates"]
    env = create_environment(template_dir)

    try:
        navigation = (template_dir / names["navigation"]).read_text(encoding="utf-8")
        static_imports = (template_dir / names["static"]).read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Unable to open partial in {template_dir}: {e}"
        raise FatalBuildError(msg) from e

    try:
        footer = env.get_template(names["footer"])
        markdown = env.get_template(names["markdown"])
    except TemplateError as e:
        msg = f"Unable to open template in {template_dir}: {e}"
        raise FatalBuildError(msg) from e

    logger.info("Loaded templates from %s", template_dir)
    return SiteTemplates(
        environment=env,
        navigation=Markup(navigation),
        static_imports=Markup(static_imports),
        footer=footer,
        markdown=markdown,
    )
