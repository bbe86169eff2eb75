"""Tests for mapping content paths to output paths."""

from pathlib import Path

import pytest

from sitegen.map_output_path import map_output_path, normalize_relative_path

CONTENT = Path("/site/content")
PUBLIC = Path("/site/public")


def test_map_markdown_file() -> None:
    """Markdown files become lower-cased HTML files under the output root."""
    out = map_output_path(CONTENT / "Blog" / "My Post.md", CONTENT, PUBLIC)
    assert out == PUBLIC / "blog" / "my_post.html"


def test_map_keeps_other_extensions() -> None:
    """Only the markdown extension is substituted."""
    assert map_output_path(CONTENT / "Logo.PNG", CONTENT, PUBLIC) == PUBLIC / "logo.png"
    assert map_output_path(CONTENT / "about.html", CONTENT, PUBLIC) == (
        PUBLIC / "about.html"
    )


def test_map_uppercase_markdown_extension() -> None:
    """Lower-casing happens before the extension check."""
    assert map_output_path(CONTENT / "NOTES.MD", CONTENT, PUBLIC) == (
        PUBLIC / "notes.html"
    )


def test_map_only_replaces_final_extension() -> None:
    """A .md inside a name is not touched."""
    out = map_output_path(CONTENT / "a.md.bak", CONTENT, PUBLIC)
    assert out == PUBLIC / "a.md.bak"


def test_map_directory_has_no_extension_substitution() -> None:
    """Directories follow the naming rules without extension changes."""
    out = map_output_path(CONTENT / "Old Notes.md", CONTENT, PUBLIC, is_dir=True)
    assert out == PUBLIC / "old_notes.md"


def test_map_content_root_is_output_root() -> None:
    """The content root itself maps to the output root."""
    assert map_output_path(CONTENT, CONTENT, PUBLIC, is_dir=True) == PUBLIC


def test_map_custom_extensions() -> None:
    """Extensions come from configuration."""
    out = map_output_path(CONTENT / "page.markdown", CONTENT, PUBLIC, ".markdown", ".htm")
    assert out == PUBLIC / "page.htm"


@pytest.mark.parametrize(
    "rel",
    ["Blog/My Post.md", "a b/C D.txt", "index.md", "already_mapped.html", "x.MD"],
)
def test_normalize_is_idempotent(rel: str) -> None:
    """Normalizing an already normalized path changes nothing."""
    once = normalize_relative_path(rel)
    assert normalize_relative_path(once) == once
