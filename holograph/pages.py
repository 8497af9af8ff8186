"""Page assembly for Holograph.

Walks the doc block hierarchy and concatenates block content into output
pages, recording a navigation entry for every page a block names.

Key functions:
- normalize_output_file: Turn an ``outputFile`` value into an HTML filename.
- assemble_pages: Build the page mapping from a block hierarchy.
- add_markdown_page: Register a standalone markdown file as a page.
- render_navigation: Render the navigation entries as an HTML list.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from markupsafe import Markup, escape

from .blocks import DocumentBlock
from .utils import read_source, titleize

DEFAULT_PAGE = "index.html"


def normalize_output_file(value: str) -> str:
    """Turn a declared output file into an HTML filename.

    Args:
        value: Raw ``outputFile`` value, e.g. ``My Example``.

    Returns:
        Lower-cased filename ending in ``.html`` with spaces replaced by
        underscores, e.g. ``my_example.html``.
    """
    filename = value.strip().lower()
    if not filename.endswith(".html"):
        filename += ".html"
    return filename.replace(" ", "_")


def assemble_pages(
    blocks: Iterable[DocumentBlock] | Mapping[str, DocumentBlock],
    output_file: str = "",
    pages: dict[str, str] | None = None,
    navigation: dict[str, str] | None = None,
) -> dict[str, str]:
    """Concatenate block content into output pages.

    The current output file is threaded through sibling iteration: a block
    that declares an output file switches the page for itself and every
    later sibling, never for earlier ones. Children start from their
    parent's page and are written after the parent's own content.

    Args:
        blocks: Blocks at this level, or a mapping of name to block.
        output_file: Page inherited from the enclosing level; empty means
            none yet (falls back to ``index.html``).
        pages: Page contents accumulated so far; a new dict when omitted.
        navigation: Receives ``filename -> page name`` for every block that
            declares an output file.

    Returns:
        Mapping of output filename to accumulated content.
    """
    if pages is None:
        pages = {}
    if isinstance(blocks, Mapping):
        blocks = blocks.values()

    for block in blocks:
        if block.output_file:
            output_file = normalize_output_file(block.output_file)

        if not output_file:
            output_file = DEFAULT_PAGE

        if block.output_file and navigation is not None:
            navigation[output_file] = block.output_file.strip()

        pages[output_file] = pages.get(output_file, "") + "\n" + block.markdown

        if block.children:
            assemble_pages(block.children, output_file, pages, navigation)

    return pages


def add_markdown_page(
    path: Path,
    pages: dict[str, str],
    navigation: dict[str, str] | None = None,
) -> str:
    """Register a markdown source file as its own page.

    Args:
        path: Markdown file; ``intro.md`` becomes ``intro.html``.
        pages: Page mapping to add to.
        navigation: Receives an entry titled after the file name.

    Returns:
        The output filename.
    """
    filename = f"{path.stem}.html"
    pages[filename] = read_source(path)
    if navigation is not None:
        navigation[filename] = titleize(path.name)
    return filename


def render_navigation(navigation: Mapping[str, str], current: str | None = None) -> Markup:
    """Render navigation entries as an HTML list.

    Args:
        navigation: Mapping of output filename to page name.
        current: Filename of the page being rendered, marked ``active``.

    Returns:
        Markup-safe ``<ul>`` element, or empty Markup without entries.
    """
    if not navigation:
        return Markup("")

    items = []
    for filename, name in navigation.items():
        css_class = ' class="active"' if filename == current else ""
        items.append(f'<li{css_class}><a href="{escape(filename)}">{escape(name)}</a></li>')
    return Markup('<ul class="navigation">' + "".join(items) + "</ul>")
