"""In-memory registry of compiled pages keyed by output path."""

import logging
from collections.abc import Iterator
from pathlib import Path

from sitegen.page import Page
from sitegen.page_kind import PageKind

logger = logging.getLogger(__name__)


class PageRegistry:
    """Authoritative answer to "does a page exist at this output path".

    The registry is filled by the content compiler and then sealed. Cross-page
    lookups for backlinks are only meaningful once every page is present, so
    the resolver requires a sealed registry and no page may be added after.
    """

    def __init__(self) -> None:
        """Initialize an empty, unsealed registry."""
        self._pages: dict[Path, Page] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        """Whether compilation has finished."""
        return self._sealed

    def seal(self) -> None:
        """Mark the registry complete."""
        self._sealed = True

    def add(self, page: Page) -> None:
        """Insert a page; a page already at the same output path is replaced."""
        if self._sealed:
            msg = f"Cannot add {page.output_path} to a sealed registry"
            raise RuntimeError(msg)
        if page.kind is PageKind.OPAQUE:
            msg = f"Opaque file {page.source_path} is not a page"
            raise ValueError(msg)
        previous = self._pages.get(page.output_path)
        if previous is not None:
            logger.warning(
                "Output path collision at %s: %s replaces %s",
                page.output_path,
                page.source_path,
                previous.source_path,
            )
        self._pages[page.output_path] = page

    def get(self, output_path: Path) -> Page | None:
        """Return the page registered at output_path, if any."""
        return self._pages.get(output_path)

    def pages(self) -> list[Page]:
        """Return all pages in output-path order."""
        return [self._pages[k] for k in sorted(self._pages)]

    def __contains__(self, output_path: object) -> bool:
        return output_path in self._pages

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages())

    def __len__(self) -> int:
        return len(self._pages)
