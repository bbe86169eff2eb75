"""Utility for classifying content files by extension."""

from collections.abc import Iterable
from pathlib import Path

from sitegen.page_kind import PageKind


def classify_page_kind(
    file_name: str,
    markdown_ext: str = ".md",
    template_exts: Iterable[str] = (".html",),
) -> PageKind:
    """Classify a content file as markdown, templated HTML or an opaque asset."""
    ext = Path(file_name).suffix.lower()
    if ext == markdown_ext.lower():
        return PageKind.MARKDOWN
    if ext in {e.lower() for e in template_exts}:
        return PageKind.TEMPLATED_HTML
    return PageKind.OPAQUE
