"""Data model for links that did not resolve to a page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnresolvedLink:
    """An internal link whose target is not in the registry."""

    source: str  # site path of the linking page
    target: str  # href as written
