"""Markdown to HTML conversion for content pages."""

import re
from collections.abc import Sequence
from typing import Any

import mistune

EXTERNAL_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class SiteHTMLRenderer(mistune.HTMLRenderer):
    """HTML renderer that opens external links in a new browsing context."""

    def __init__(self, *, external_links_new_tab: bool = True) -> None:
        """Initialize the renderer; raw HTML in content is passed through."""
        super().__init__(escape=False)
        self.external_links_new_tab = external_links_new_tab

    def link(self, text: str, url: str, title: str | None = None) -> str:
        """Render a link, adding target/rel attributes to external URLs."""
        html = super().link(text, url, title)
        if self.external_links_new_tab and EXTERNAL_URL_RE.match(url):
            html = html.replace("<a ", '<a target="_blank" rel="noopener" ', 1)
        return html


def create_markdown_parser(
    plugins: Sequence[str] = ("table", "strikethrough", "footnotes", "url"),
    *,
    external_links_new_tab: bool = True,
) -> mistune.Markdown:
    """Create a mistune parser with the site renderer and plugins."""
    return mistune.create_markdown(
        renderer=SiteHTMLRenderer(external_links_new_tab=external_links_new_tab),
        plugins=list(plugins),
    )


def markdown_parser_from_config(config: dict[str, Any]) -> mistune.Markdown:
    """Create the markdown parser described by the 'markdown' config section."""
    md_config = config.get("markdown", {})
    return create_markdown_parser(
        md_config.get("plugins", ()),
        external_links_new_tab=md_config.get("external_links_new_tab", True),
    )


def markdown_to_html(text: str, parser: mistune.Markdown | None = None) -> str:
    """Convert markdown text to HTML."""
    if parser is None:
        parser = create_markdown_parser()
    return str(parser(text))
