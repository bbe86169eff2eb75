"""End-to-end tests for the three-pass site build."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from conftest import write_file
from sitegen.backlink_resolver import resolve_backlinks
from sitegen.build_site import build_site, main
from sitegen.compile_content import compile_content
from sitegen.load_config import DEFAULT_CONFIG, resolve_directories
from sitegen.page_kind import PageKind


def test_blog_backlinks(site_config: dict[str, Any]) -> None:
    """A post linking to its section shows up on the section index."""
    content = site_config["content_dir"]
    write_file(content / "blog" / "index.md", "plain text")
    write_file(content / "blog" / "post.md", "[home](/blog)")
    result = build_site(site_config)

    out = site_config["output_dir"]
    index = result.registry.get(out / "blog" / "index.html")
    post = result.registry.get(out / "blog" / "post.html")
    assert index.backlinks == {"/blog/post.html": "post"}
    assert post.backlinks == {}
    assert (out / "blog" / "index.html").exists()
    assert (out / "blog" / "post.html").exists()
    index_html = (out / "blog" / "index.html").read_text(encoding="utf-8")
    assert '<a class="backlink" href="/blog/post.html">post</a>' in index_html
    post_html = (out / "blog" / "post.html").read_text(encoding="utf-8")
    assert 'class="backlink"' not in post_html
    assert result.unresolved == []


def test_opaque_file_copied_verbatim(site_config: dict[str, Any]) -> None:
    """Opaque files are copied and take no part in backlinks."""
    data = b"read me\r\n\x00binary"
    (site_config["content_dir"] / "readme.txt").write_bytes(data)
    write_file(site_config["content_dir"] / "page.md", "[r](/readme.txt)")
    result = build_site(site_config)

    out = site_config["output_dir"]
    assert (out / "readme.txt").read_bytes() == data
    assert out / "readme.txt" not in result.registry
    assert all(p.kind is not PageKind.OPAQUE for p in result.registry)
    assert [u.target for u in result.unresolved] == ["/readme.txt"]


def test_colliding_names_do_not_crash(site_config: dict[str, Any]) -> None:
    """Two sources mapping to one output path leave exactly one page."""
    write_file(site_config["content_dir"] / "A b.md", "first")
    write_file(site_config["content_dir"] / "a_b.md", "second")
    result = build_site(site_config)

    assert len(result.registry) == 1
    html = (site_config["output_dir"] / "a_b.html").read_text(encoding="utf-8")
    assert "second" in html


def test_unresolved_link_does_not_stop_rendering(site_config: dict[str, Any]) -> None:
    """Pages with dangling links still render."""
    write_file(site_config["content_dir"] / "a.md", "[gone](/gone)")
    write_file(site_config["content_dir"] / "b.md", "[a](/a.html)")
    result = build_site(site_config)

    assert len(result.summary.rendered) == 2
    assert result.registry.get(site_config["output_dir"] / "a.html").backlinks == {
        "/b.html": "b"
    }
    assert all(not p.backlinks for p in result.registry if p.display_name != "a")


def test_templated_page_is_a_link_target(site_config: dict[str, Any]) -> None:
    """Hand-written HTML pages receive backlinks from markdown pages."""
    write_file(
        site_config["content_dir"] / "About Me.html",
        "<main>{{ name }}</main>{{ footer }}",
    )
    write_file(site_config["content_dir"] / "post.md", "see [me](/about_me.html)")
    build_site(site_config)

    html = (site_config["output_dir"] / "about_me.html").read_text(encoding="utf-8")
    assert "<main>About Me</main>" in html
    assert 'href="/post.html">post</a>' in html


def test_links_to_escaped_names_resolve(site_config: dict[str, Any]) -> None:
    """Non-ASCII and ampersand page names receive backlinks from markdown links."""
    write_file(site_config["content_dir"] / "Café.md", "menu")
    write_file(site_config["content_dir"] / "a&b.md", "both")
    write_file(site_config["content_dir"] / "post.md", "[menu](/café.html) [x](/a&b.html)")
    result = build_site(site_config)

    out = site_config["output_dir"]
    assert result.unresolved == []
    assert result.registry.get(out / "café.html").backlinks == {"/post.html": "post"}
    assert result.registry.get(out / "a&b.html").backlinks == {"/post.html": "post"}


def test_backlinks_independent_of_creation_order(tmp_path: Path) -> None:
    """Two trees holding the same files, created in opposite orders, link alike."""
    files = {
        "a.md": "[b](/b.html) [c](/c)",
        "b.md": "[a](/a.html)",
        "c/index.md": "[a](/a.html)",
    }
    results = []
    for name, order in (("forward", list(files)), ("backward", list(reversed(files)))):
        config = resolve_directories(DEFAULT_CONFIG, tmp_path / name)
        for rel in order:
            write_file(config["content_dir"] / rel, files[rel])
        registry, _ = resolve_backlinks(compile_content(config), config)
        results.append({p.site_path: p.backlinks for p in registry})

    assert results[0] == results[1]
    assert results[0]["/a.html"] == {"/b.html": "b", "/c/index.html": "Oliver"}
    assert results[0]["/c/index.html"] == {"/a.html": "a"}


def test_main_writes_site_and_report(
    site_config: dict[str, Any], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The command line builds the site and writes a JSON report."""
    write_file(site_config["content_dir"] / "index.md", "[x](/missing)")
    write_file(site_config["content_dir"] / "post.md", "[home](/)")
    config_file = tmp_path / "sitegen.yml"
    config_file.write_text(yaml.dump({"site_name": "Garden"}))
    report_file = tmp_path / "report.json"

    assert main(["--config", str(config_file), "--report", str(report_file)]) == 0
    assert "Generated 2 pages" in capsys.readouterr().out

    report = json.loads(report_file.read_text(encoding="utf-8"))
    assert report["meta"]["total_pages"] == 2
    pages = {p["path"]: p for p in report["pages"]}
    assert pages["/index.html"]["name"] == "Garden"
    assert pages["/index.html"]["backlinks"] == {"/post.html": "post"}
    assert report["unresolved_links"] == [{"source": "/index.html", "target": "/missing"}]
    assert report["stats"]["orphans"] == ["/post.html"]
    assert report["render_failures"] == []


def test_main_fails_without_templates(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Missing shared templates make the command fail."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "content").mkdir()
    assert main([]) == 1
    assert not (tmp_path / "public").exists()
