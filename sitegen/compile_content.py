"""First pass: walk the content tree and build the page registry."""

import logging
import shutil
from pathlib import Path
from typing import Any

import mistune

from sitegen.build_errors import FatalBuildError
from sitegen.classify_page_kind import classify_page_kind
from sitegen.display_name import display_name_for
from sitegen.map_output_path import map_output_path, site_path_for
from sitegen.markdown_to_html import markdown_parser_from_config, markdown_to_html
from sitegen.page import Page
from sitegen.page_kind import PageKind
from sitegen.page_registry import PageRegistry

logger = logging.getLogger(__name__)


class ContentCompiler:
    """Converts a content tree into pages, copying opaque files as it goes."""

    def __init__(
        self,
        config: dict[str, Any],
        registry: PageRegistry | None = None,
        parser: mistune.Markdown | None = None,
    ) -> None:
        """Initialize the compiler from a loaded configuration."""
        self.content_root = Path(config["content_dir"])
        self.output_root = Path(config["output_dir"])
        self.index_name = config["index_name"]
        self.markdown_ext = config["markdown_extension"]
        self.html_ext = config["html_extension"]
        self.template_exts = list(config["template_extensions"])
        self.registry = registry if registry is not None else PageRegistry()
        self.parser = parser or markdown_parser_from_config(config)
        self.copied: list[Path] = []

    def compile_directory(self, directory: Path, inherited_name: str) -> None:
        """Compile every entry of directory into the registry.

        Sub-directories receive this directory's name as their inherited
        display name, except at the content root where inherited_name is
        handed down unchanged.
        """
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            msg = f"Unable to list content directory {directory}: {e}"
            raise FatalBuildError(msg) from e

        for entry in entries:
            if entry.is_dir():
                self._compile_subdirectory(directory, entry, inherited_name)
            else:
                self.compile_file(entry, inherited_name)

    def _compile_subdirectory(
        self, directory: Path, entry: Path, inherited_name: str
    ) -> None:
        out_dir = self._output_path_for(entry, is_dir=True)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Unable to create directory %s: %s", out_dir, e)
            return
        logger.debug("Created directory %s", out_dir)

        child_name = inherited_name
        if directory != self.content_root:
            child_name = directory.name
        self.compile_directory(entry, child_name)

    def compile_file(self, path: Path, inherited_name: str) -> Page | None:
        """Compile one file; returns the registered page, or None."""
        out_path = self._output_path_for(path)
        kind = classify_page_kind(path.name, self.markdown_ext, self.template_exts)

        if kind is PageKind.OPAQUE:
            self._copy_opaque(path, out_path)
            return None

        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning("Unable to read source %s: %s", path, e)
            return None

        page = Page(
            source_path=path.resolve(),
            output_path=out_path,
            site_path=site_path_for(out_path, self.output_root),
            display_name=display_name_for(path.name, inherited_name, self.index_name),
            kind=kind,
        )

        if kind is PageKind.MARKDOWN:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning("Unable to decode markdown source %s: %s", path, e)
                return None
            page.body = markdown_to_html(text, self.parser)

        self.registry.add(page)
        logger.debug("Compiled %s as %s", path, kind.value)
        return page

    def _copy_opaque(self, path: Path, out_path: Path) -> None:
        logger.debug("Copying %s", path)
        try:
            shutil.copyfile(path, out_path)
        except OSError as e:
            logger.warning("Unable to copy %s to %s: %s", path, out_path, e)
            return
        self.copied.append(out_path)

    def _output_path_for(self, path: Path, *, is_dir: bool = False) -> Path:
        return map_output_path(
            path,
            self.content_root,
            self.output_root,
            self.markdown_ext,
            self.html_ext,
            is_dir=is_dir,
        )


def compile_content(
    config: dict[str, Any], parser: mistune.Markdown | None = None
) -> PageRegistry:
    """Compile the whole content tree and return the sealed registry."""
    compiler = ContentCompiler(config, parser=parser)
    content_root = compiler.content_root
    if not content_root.is_dir():
        msg = f"Content directory not found: {content_root}"
        raise FatalBuildError(msg)

    compiler.output_root.mkdir(parents=True, exist_ok=True)
    compiler.compile_directory(content_root, config["site_name"])
    compiler.registry.seal()

    logger.info(
        "Parsed %d pages, copied %d files",
        len(compiler.registry),
        len(compiler.copied),
    )
    return compiler.registry
