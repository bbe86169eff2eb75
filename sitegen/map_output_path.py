"""Utility for mapping content paths to their output paths."""

from pathlib import Path, PurePosixPath


def normalize_relative_path(
    rel: str,
    markdown_ext: str = ".md",
    html_ext: str = ".html",
    *,
    is_dir: bool = False,
) -> str:
    """Apply the output naming rules to a content-relative POSIX path.

    Lower-cases, replaces spaces with underscores and swaps the markdown
    extension for the HTML one. Applying it twice gives the same result.
    """
    rel = rel.lower().replace(" ", "_")
    if is_dir:
        return rel
    p = PurePosixPath(rel)
    if p.suffix == markdown_ext.lower():
        return str(p.with_suffix(html_ext.lower()))
    return rel


def map_output_path(
    content_path: Path,
    content_root: Path,
    output_root: Path,
    markdown_ext: str = ".md",
    html_ext: str = ".html",
    *,
    is_dir: bool = False,
) -> Path:
    """Map a file or directory under content_root to its place under output_root."""
    # content/Blog/My Post.md -> public/blog/my_post.html
    rel = content_path.relative_to(content_root).as_posix()
    if rel == ".":
        return output_root
    return output_root / normalize_relative_path(
        rel, markdown_ext, html_ext, is_dir=is_dir
    )


def site_path_for(output_path: Path, output_root: Path) -> str:
    """Return output_path relative to output_root as a /-prefixed site path."""
    rel = output_path.relative_to(output_root).as_posix()
    return "/" if rel == "." else f"/{rel}"
