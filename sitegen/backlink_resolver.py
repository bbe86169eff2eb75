"""Second pass: resolve internal links into reverse backlink edges."""

import html
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from sitegen.extract_links import iter_internal_links
from sitegen.page import Page
from sitegen.page_registry import PageRegistry
from sitegen.unresolved_link import UnresolvedLink

logger = logging.getLogger(__name__)


def normalize_link_target(target: str) -> str:
    """Decode an href into a site path.

    Entities and percent-escapes are decoded so /caf%C3%A9.html matches
    café.html; the query string, fragment and trailing slash are dropped.
    """
    target = html.unescape(target)
    for sep in ("#", "?"):
        target = target.split(sep, 1)[0]
    return unquote(target).rstrip("/") or "/"


class BacklinkResolver:
    """Records, on every linked page, which pages link to it."""

    def __init__(
        self,
        registry: PageRegistry,
        output_root: Path,
        index_filename: str = "index.html",
    ) -> None:
        """Initialize the resolver over a sealed registry."""
        if not registry.sealed:
            msg = "Backlinks can only be resolved once every page is compiled"
            raise RuntimeError(msg)
        self.registry = registry
        self.output_root = output_root
        self.index_filename = index_filename

    def lookup(self, target: str) -> Page | None:
        """Find the page an internal href points at.

        Tries the exact output path first, then the directory's index page.
        """
        rel = normalize_link_target(target).lstrip("/")
        candidate = self.output_root / rel if rel else self.output_root
        page = self.registry.get(candidate)
        if page is not None:
            return page
        return self.registry.get(candidate / self.index_filename)

    def resolve_page(self, page: Page) -> list[UnresolvedLink]:
        """Record a backlink for every resolvable link in page's body."""
        unresolved: list[UnresolvedLink] = []
        for target in iter_internal_links(page.body):
            logger.debug("Found link in %s: %s", page.site_path, target)
            target_page = self.lookup(target)
            if target_page is None:
                logger.warning(
                    "Unable to find page for link %s in %s", target, page.site_path
                )
                unresolved.append(UnresolvedLink(page.site_path, target))
                continue
            target_page.backlinks[page.site_path] = page.display_name
        return unresolved

    def resolve_all(self) -> list[UnresolvedLink]:
        """Resolve links for every page that has a compiled body."""
        unresolved: list[UnresolvedLink] = []
        for page in self.registry:
            if page.body:
                unresolved.extend(self.resolve_page(page))
        return unresolved


def resolve_backlinks(
    registry: PageRegistry, config: dict[str, Any]
) -> tuple[PageRegistry, list[UnresolvedLink]]:
    """Populate backlinks in place and return the registry with unresolved links."""
    index_filename = config["index_name"] + config["html_extension"]
    resolver = BacklinkResolver(
        registry, Path(config["output_dir"]), index_filename.lower()
    )
    unresolved = resolver.resolve_all()
    logger.info(
        "Resolved backlinks for %d pages (%d unresolved links)",
        len(registry),
        len(unresolved),
    )
    return registry, unresolved
