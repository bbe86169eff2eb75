"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from sitegen.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "site_name": "Oliver",
    "content_dir": "content",
    "output_dir": "public",
    "template_dir": "template",
    "index_name": "index",
    "markdown_extension": ".md",
    "html_extension": ".html",
    "template_extensions": [".html"],
    "templates": {
        "navigation": "navigation.html",
        "static": "static.html",
        "footer": "footer.html",
        "markdown": "markdown.html",
    },
    "markdown": {
        "plugins": ["table", "strikethrough", "footnotes", "url", "task_lists"],
        "external_links_new_tab": True,
    },
}

DIRECTORY_KEYS = ("content_dir", "output_dir", "template_dir")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Directory settings are resolved to absolute paths, relative to the
    config file when one is given and to the working directory otherwise.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    base_dir = Path.cwd()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            base_dir = p.resolve().parent
    return resolve_directories(config, base_dir)


def resolve_directories(config: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Return a copy of config with its directory settings made absolute."""
    resolved = dict(config)
    for key in DIRECTORY_KEYS:
        resolved[key] = (base_dir / str(config[key])).resolve()
    return resolved
