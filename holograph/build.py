"""Site building functionality for Holograph.

This module contains the core logic for building the style guide from a
source tree. It reads stylesheets and markdown files, collects doc blocks,
assembles and renders pages, and writes them with their assets to the
destination directory.

Key functions:
- build_site: Main function to build the entire style guide.
- parse_source_files: Turn source files into pages and doc blocks.
- run_preprocessor: Compile the main stylesheet.
- write_output_files: Render pages and write them to disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from .assets import AssetPipeline, asset_subdirectories, resolve_asset_dir
from .blocks import BlockCollector, DocumentBlock
from .config import dump_config, merge_config
from .errors import BuildError
from .extractors import parse_stylesheet_file
from .logger import MemoryLogger
from .pages import add_markdown_page, assemble_pages, render_navigation
from .preprocessors import create_preprocessor
from .protocols import Logger
from .renderers import MarkdownRenderer
from .templates import BUILTIN_TEMPLATES_DIR, LayoutRenderer
from .utils import ensure_dir, find_source_files, is_markdown


class BuildStatus(IntEnum):
    """Outcome of a build, usable as a process exit status."""

    OK = 0
    NOTHING_FOUND = 1


@dataclass
class BuildResult:
    """Result of a style guide build.

    Attributes:
        status: Whether anything was built.
        output_dir: Directory where the style guide was written.
        pages: Assembled (unrendered) content keyed by output filename.
        navigation: Page names keyed by output filename.
        blocks: Top-level doc blocks keyed by name.
    """

    status: BuildStatus
    output_dir: Path
    pages: dict[str, str] = field(default_factory=dict)
    navigation: dict[str, str] = field(default_factory=dict)
    blocks: dict[str, DocumentBlock] = field(default_factory=dict)


def build_site(
    project_root: Path,
    config: dict[str, Any] | None = None,
    logger: Logger | None = None,
    renderer: MarkdownRenderer | None = None,
) -> BuildResult:
    """Build the entire style guide.

    Args:
        project_root: Directory relative config paths are resolved against.
        config: Configuration overrides; defaults fill in the rest.
        logger: Receives progress and warnings; a MemoryLogger when omitted.
        renderer: Markdown renderer for the pages.

    Returns:
        BuildResult; its status is NOTHING_FOUND when the source directory
        holds no stylesheets or markdown files, in which case nothing is
        written.

    Raises:
        BuildError: If a source file or layout template cannot be processed.
        ConfigError: If the configuration cannot be used.
    """
    config = merge_config(config)
    logger = logger or MemoryLogger()
    logger.info("Using configuration:\n" + dump_config(config))

    output_dir = project_root / config["destination"]
    source_dir = project_root / config["source"]

    logger.notice(f"Reading source dir '{source_dir}'...")
    files = find_source_files(source_dir)
    logger.info(f"Found {len(files)} files in source dir")
    if not files:
        logger.warning(f"No source files found in '{source_dir}'")
        return BuildResult(status=BuildStatus.NOTHING_FOUND, output_dir=output_dir)

    run_preprocessor(project_root, config, logger)

    collector = BlockCollector(logger)
    pages: dict[str, str] = {}
    navigation: dict[str, str] = {}
    parse_source_files(files, collector, pages, navigation, logger)
    assemble_pages(collector.blocks, pages=pages, navigation=navigation)

    assets_dir = project_root / config["documentation_assets"]
    if not assets_dir.is_dir():
        logger.warning(
            f"Documentation assets dir '{assets_dir}' not found; using the built-in templates"
        )
        assets_dir = BUILTIN_TEMPLATES_DIR

    layout = LayoutRenderer(assets_dir, logger, compat_mode=bool(config["compat_mode"]))
    write_output_files(
        pages,
        navigation,
        output_dir,
        layout,
        renderer or MarkdownRenderer(),
        logger,
        title=str(config["title"]),
        main_stylesheet=str(config["main_stylesheet"]),
    )

    dependencies = config["dependencies"] or []
    if isinstance(dependencies, (str, Path)):
        dependencies = [dependencies]
    asset_dirs = [resolve_asset_dir(project_root, path) for path in dependencies]
    asset_dirs.extend(asset_subdirectories(assets_dir))
    AssetPipeline(output_dir, logger).run(asset_dirs)

    return BuildResult(
        status=BuildStatus.OK,
        output_dir=output_dir,
        pages=pages,
        navigation=navigation,
        blocks=collector.blocks,
    )


def run_preprocessor(project_root: Path, config: dict[str, Any], logger: Logger) -> bool | None:
    """Compile the main stylesheet with the configured preprocessor.

    Args:
        project_root: Directory relative config paths are resolved against.
        config: Merged configuration.
        logger: Receives progress messages.

    Returns:
        The preprocessor's result; None for the ``none`` preprocessor.
    """
    preprocessor = create_preprocessor(
        config["preprocessor"],
        source_dir=project_root / config["source"],
        destination_dir=project_root / config["build"],
    )
    logger.info(f"Running preprocessor '{config['preprocessor']}'")
    return preprocessor.execute(
        {"main_stylesheet": project_root / config["main_stylesheet"]}
    )


def parse_source_files(
    files: Iterable[Path],
    collector: BlockCollector,
    pages: dict[str, str],
    navigation: dict[str, str],
    logger: Logger,
) -> int:
    """Turn source files into pages and doc blocks.

    Markdown files become pages of their own; stylesheets contribute their
    doc blocks to the collector.

    Args:
        files: Source files in build order.
        collector: Receives doc blocks.
        pages: Receives markdown pages.
        navigation: Receives navigation entries for markdown pages.
        logger: Receives progress messages.

    Returns:
        Number of doc blocks added.
    """
    added = 0
    for path in files:
        if is_markdown(path):
            logger.info(f"Reading file '{path}'")
            add_markdown_page(path, pages, navigation)
        else:
            added += parse_stylesheet_file(path, collector, logger)
    return added


def write_output_files(
    pages: dict[str, str],
    navigation: dict[str, str],
    output_dir: Path,
    layout: LayoutRenderer,
    renderer: MarkdownRenderer,
    logger: Logger,
    title: str = "",
    main_stylesheet: str = "",
) -> list[Path]:
    """Render every page and write it to the output directory.

    Args:
        pages: Assembled content keyed by output filename.
        navigation: Page names keyed by output filename.
        output_dir: Destination directory.
        layout: Wraps rendered content in the documentation layout.
        renderer: Converts page markdown to HTML.
        logger: Receives progress messages.
        title: Style guide title.
        main_stylesheet: Stylesheet linked from every page.

    Returns:
        Paths of the written files.
    """
    ensure_dir(output_dir)
    logger.notice(f"Writing to dest dir '{output_dir}'...")

    written = []
    for filename, content in pages.items():
        target = output_dir / filename
        logger.info(f"Writing file '{target}'")
        html = renderer.render(content)
        try:
            rendered = layout.render(
                html,
                title=title,
                main_stylesheet=main_stylesheet,
                navigation=render_navigation(navigation, current=filename),
            )
        except TemplateError as exc:
            raise BuildError(
                layout.assets_dir,
                f"Layout template error: {exc.message or exc}",
                exc,
            ) from exc
        ensure_dir(target.parent)
        target.write_text(rendered, encoding="utf-8")
        written.append(target)
    return written
