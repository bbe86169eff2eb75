"""Compile a content tree into a static site with backlinks.

The build runs three passes, each to completion before the next:
compile the content tree into a page registry, resolve internal links into
backlinks, then render every page through the shared layouts.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sitegen.backlink_resolver import resolve_backlinks
from sitegen.build_errors import FatalBuildError
from sitegen.build_report import BuildReport
from sitegen.compile_content import compile_content
from sitegen.compute_config_hash import compute_config_hash
from sitegen.load_config import load_config
from sitegen.render_site import RenderSummary, render_site
from sitegen.site_templates import load_site_templates

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sitegen.page_registry import PageRegistry
    from sitegen.unresolved_link import UnresolvedLink

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Everything the three passes produced."""

    registry: PageRegistry
    unresolved: list[UnresolvedLink] = field(default_factory=list)
    summary: RenderSummary = field(default_factory=RenderSummary)


def build_site(config: dict[str, Any]) -> BuildResult:
    """Run the full compile -> resolve -> render pipeline."""
    templates = load_site_templates(config)
    registry = compile_content(config)
    registry, unresolved = resolve_backlinks(registry, config)
    summary = render_site(registry, templates)
    return BuildResult(registry=registry, unresolved=unresolved, summary=summary)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the site build from the command line."""
    ap = argparse.ArgumentParser(
        description="Compile markdown and templated HTML into a static site.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON build report to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every compiled, linked and rendered file",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    report = BuildReport(compute_config_hash(config))
    try:
        result = build_site(config)
    except FatalBuildError as e:
        logger.error("%s", e)
        return 1

    if args.report:
        report.add_pages(result.registry)
        report.add_unresolved(result.unresolved)
        report.add_render_summary(result.summary)
        report.generate_report(args.report)

    print(
        f"Generated {len(result.summary.rendered)} pages into: {config['output_dir']}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
