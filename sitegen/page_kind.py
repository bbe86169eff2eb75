"""Classification of compiled content files."""

from enum import Enum


class PageKind(Enum):
    """Which rendering branch a content file takes."""

    MARKDOWN = "markdown"
    TEMPLATED_HTML = "templated_html"
    OPAQUE = "opaque"
