"""Shared fixtures for building small sites in a temporary directory."""

from pathlib import Path
from typing import Any

import pytest

from sitegen.load_config import DEFAULT_CONFIG, resolve_directories

FOOTER = """<footer>{% for path, name in backlinks %}<a class="backlink" href="{{ path }}">{{ name }}</a>{% endfor %}</footer>"""
LAYOUT = """<html><head>{{ static_imports }}</head><body>{{ navigation }}<h1>{{ name }}</h1>{{ content }}{{ footer }}</body></html>"""


def write_file(path: Path, text: str) -> Path:
    """Write text to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_config(tmp_path: Path) -> dict[str, Any]:
    """Configuration rooted in tmp_path with the shared templates in place."""
    write_file(tmp_path / "template" / "navigation.html", "<nav>menu</nav>")
    write_file(tmp_path / "template" / "static.html", '<link rel="stylesheet">')
    write_file(tmp_path / "template" / "footer.html", FOOTER)
    write_file(tmp_path / "template" / "markdown.html", LAYOUT)
    (tmp_path / "content").mkdir()
    return resolve_directories(DEFAULT_CONFIG, tmp_path)
