"""Logic for deriving a page's display name from its file name."""

from pathlib import Path


def is_index_document(file_name: str, index_name: str = "index") -> bool:
    """Return True when the file is a directory landing page (case-insensitive)."""
    return Path(file_name).stem.lower() == index_name.lower()


def display_name_for(
    file_name: str, inherited_name: str, index_name: str = "index"
) -> str:
    """Return the file stem, or the inherited name for index documents."""
    if is_index_document(file_name, index_name):
        return inherited_name
    return Path(file_name).stem
