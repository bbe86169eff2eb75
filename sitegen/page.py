"""Data model for one compiled unit of content."""

from dataclasses import dataclass, field
from pathlib import Path

from sitegen.page_kind import PageKind


@dataclass
class Page:
    """A markdown or templated HTML file held in memory between passes."""

    source_path: Path
    output_path: Path
    site_path: str  # output path relative to the output root, e.g. /blog/post.html
    display_name: str
    kind: PageKind
    body: str = ""
    # site path of the referencing page -> its display name
    backlinks: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Alias used by templates."""
        return self.display_name

    def sorted_backlinks(self) -> list[tuple[str, str]]:
        """Return backlinks ordered by site path for stable output."""
        return sorted(self.backlinks.items())
