"""Scanning of compiled HTML for internal link targets."""

import re
from collections.abc import Iterator

# <a ... href="/path"> with either quote style; group 2 is the target
HREF_RE = re.compile(r"""<a\s+(?:[^>]*?\s+)?href=(["'])(/(?!/).*?)\1""", re.IGNORECASE)


def iter_internal_links(html: str) -> Iterator[str]:
    """Yield absolute internal hrefs in document order, duplicates included."""
    for m in HREF_RE.finditer(html):
        yield m.group(2)
