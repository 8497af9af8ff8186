"""Doc block extraction for Holograph.

This module finds doc comments in stylesheets and turns their YAML front
matter and markdown body into DocumentBlock objects.

A doc comment looks like::

    /*doc
    ---
    name: buttons
    title: Buttons
    category: Base CSS
    ---
    Markdown describing the buttons.
    */

Key functions:
- extract_comment_blocks: Find the bodies of all doc comments in a file.
- create_document_block: Build a DocumentBlock from one comment body.
- parse_stylesheet_file: Parse a stylesheet and add its blocks to a collector.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from .blocks import BlockCollector, DocumentBlock
from .errors import BuildError, InvalidBlockError
from .protocols import Logger
from .utils import read_source

DOC_COMMENT_RE = re.compile(r"^\s*/\*doc(.*?)\*/", re.MULTILINE | re.DOTALL)
FRONTMATTER_RE = re.compile(r"\s*---\s(.*?)\s---$", re.MULTILINE | re.DOTALL)


def extract_comment_blocks(text: str) -> list[str]:
    """Find the bodies of all doc comments in a stylesheet.

    Args:
        text: Full stylesheet source.

    Returns:
        List of comment bodies, without the ``/*doc`` and ``*/`` markers.
    """
    return DOC_COMMENT_RE.findall(text)


def parse_frontmatter(raw: str, filename: str, logger: Logger) -> dict[str, Any]:
    """Parse front matter text into block settings.

    A scalar (or any other non-mapping value) is taken as the block name.

    Args:
        raw: YAML text between the ``---`` markers.
        filename: Source file, for the warning message.
        logger: Receives a warning for non-mapping front matter.

    Returns:
        Settings dictionary.
    """
    data = yaml.safe_load(raw)
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            f"Front matter in '{filename}' is not a mapping; using it as the block name: {raw}"
        )
        return {"name": data}
    return data


def create_document_block(
    comment_block: str, filename: str, logger: Logger
) -> DocumentBlock | None:
    """Create a document block from a comment body.

    Comments without a ``---`` delimited front matter section are not doc
    blocks and are ignored.

    Args:
        comment_block: Comment body as returned by extract_comment_blocks.
        filename: Source file name, used in warnings.
        logger: Receives parse warnings.

    Returns:
        The DocumentBlock, or None if the comment has no front matter.

    Raises:
        InvalidBlockError: If the front matter has no ``name``.
        yaml.YAMLError: If the front matter is not valid YAML.
    """
    match = FRONTMATTER_RE.search(comment_block)
    if not match:
        return None

    settings = parse_frontmatter(match.group(1), filename, logger)
    markdown = comment_block[match.end() :]
    return DocumentBlock.from_settings(settings, markdown)


def parse_stylesheet_file(path: Path, collector: BlockCollector, logger: Logger) -> int:
    """Parse a stylesheet and add its doc blocks to the collector.

    Args:
        path: Stylesheet to read.
        collector: Collector receiving the blocks.
        logger: Receives progress and warnings.

    Returns:
        Number of blocks added.

    Raises:
        BuildError: If the file cannot be decoded or a doc block has invalid
            front matter.
    """
    logger.info(f"Reading file '{path}'")
    contents = read_source(path)

    added = 0
    for comment_block in extract_comment_blocks(contents):
        try:
            block = create_document_block(comment_block, str(path), logger)
        except yaml.YAMLError as exc:
            raise BuildError(path, f"Invalid YAML in doc block: {exc}", exc) from exc
        except InvalidBlockError as exc:
            raise BuildError(path, str(exc), exc) from exc
        if block is None:
            continue
        collector.add(block)
        added += 1
    return added
