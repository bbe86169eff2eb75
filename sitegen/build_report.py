"""JSON summary of a site build."""

import json
import time
from pathlib import Path
from typing import Any

from sitegen.page_registry import PageRegistry
from sitegen.render_site import RenderSummary
from sitegen.unresolved_link import UnresolvedLink


class BuildReport:
    """Collects what each pass produced and writes it as JSON."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with the hash of the build configuration."""
        self.config_hash = config_hash
        self.start_time = time.time()
        self.pages: list[dict[str, Any]] = []
        self.unresolved: list[UnresolvedLink] = []
        self.failed: list[str] = []

    def add_pages(self, registry: PageRegistry) -> None:
        """Record every compiled page with its backlinks."""
        for page in registry:
            self.pages.append(
                {
                    "path": page.site_path,
                    "name": page.display_name,
                    "kind": page.kind.value,
                    "backlinks": dict(page.sorted_backlinks()),
                }
            )

    def add_unresolved(self, links: list[UnresolvedLink]) -> None:
        """Record links that did not resolve to a page."""
        self.unresolved.extend(links)

    def add_render_summary(self, summary: RenderSummary) -> None:
        """Record the output paths of pages that failed to render."""
        self.failed.extend(str(p) for p in summary.failed)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as JSON-serializable data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_pages": len(self.pages),
            },
            "pages": self.pages,
            "unresolved_links": [
                {"source": u.source, "target": u.target} for u in self.unresolved
            ],
            "render_failures": self.failed,
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str | Path) -> None:
        """Write the report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        kind_counts: dict[str, int] = {}
        for p in self.pages:
            kind_counts[p["kind"]] = kind_counts.get(p["kind"], 0) + 1
        return {
            "kind_counts": kind_counts,
            "backlinks": sum(len(p["backlinks"]) for p in self.pages),
            "orphans": [p["path"] for p in self.pages if not p["backlinks"]],
        }
