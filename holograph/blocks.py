"""Doc block model and collection for Holograph.

A doc block is a comment region in a stylesheet holding YAML front matter and
a markdown body. Blocks form a two-level hierarchy: top-level blocks keyed by
name, each with an ordered mapping of child blocks.

Key classes:
- DocumentBlock: Dataclass representing one parsed doc block.
- BlockCollector: Files parsed blocks under their names and parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidBlockError
from .protocols import Logger
from .utils import ucfirst

DEFAULT_CATEGORY = "Index"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _prepend_heading(block: DocumentBlock, marker: str) -> None:
    if block.headed:
        return
    block.markdown = f"\n\n{marker} {block.title}\n{block.markdown}"
    block.headed = True


@dataclass
class DocumentBlock:
    """One parsed doc block.

    Attributes:
        name: Unique identifier of the block.
        title: Display title, defaults to ``name`` with a capital first letter.
        category: Grouping label, defaults to ``Index``.
        parent: Name of the containing block; empty for top-level blocks.
        output_file: Page the block is written to; empty means inherited.
        markdown: Markdown (and raw HTML) body of the block.
        children: Child blocks keyed by name, in insertion order.
        headed: Whether the collector has prepended the heading yet.
    """

    name: str
    title: str = ""
    category: str = DEFAULT_CATEGORY
    parent: str = ""
    output_file: str = ""
    markdown: str = ""
    children: dict[str, DocumentBlock] = field(default_factory=dict)
    headed: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.title:
            self.title = ucfirst(self.name)
        if not self.category:
            self.category = DEFAULT_CATEGORY

    @classmethod
    def from_settings(cls, settings: dict[str, Any], markdown: str = "") -> DocumentBlock:
        """Create a block from parsed front matter.

        Args:
            settings: Front matter mapping (``name``, ``title``, ``category``,
                ``parent``, ``outputFile``).
            markdown: Body of the doc block.

        Returns:
            The new DocumentBlock.

        Raises:
            InvalidBlockError: If ``name`` is missing or blank.
        """
        if "name" not in settings:
            raise InvalidBlockError("Required parameter 'name' not found in comment block.")
        name = _text(settings["name"]).strip()
        if not name:
            raise InvalidBlockError("Parameter 'name' in comment block is empty.")

        return cls(
            name=name,
            title=_text(settings.get("title")),
            category=_text(settings.get("category")),
            parent=_text(settings.get("parent")).strip(),
            output_file=_text(settings.get("outputFile")),
            markdown=markdown,
        )


class BlockCollector:
    """Accumulates doc blocks into a hierarchy keyed by name.

    Top-level blocks get a level-1 heading and default to the page named
    after their category. Child blocks get a level-2 heading and are filed
    under their parent. A child arriving before its parent is attached to a
    placeholder parent; a real parent arriving afterwards replaces that
    placeholder, and the children filed under it are lost. Authors have to
    declare parents before their children in source order.

    Attributes:
        blocks: Top-level blocks keyed by name, in insertion order.
        logger: Receives duplicate-name warnings.
    """

    def __init__(self, logger: Logger):
        self.blocks: dict[str, DocumentBlock] = {}
        self.logger = logger

    def add(self, block: DocumentBlock) -> None:
        """Add a parsed block to the collection.

        Args:
            block: Block to add; its markdown gains a heading.
        """
        if not block.parent:
            self._add_top_level(block)
            return

        parent = self.blocks.get(block.parent)
        if parent is None:
            parent = DocumentBlock(name=block.parent)
            self._add_top_level(parent)

        _prepend_heading(block, "##")
        parent.children[block.name] = block

    def _add_top_level(self, block: DocumentBlock) -> None:
        if not block.output_file:
            block.output_file = block.category

        _prepend_heading(block, "#")

        if block.name in self.blocks:
            self.logger.warning(f"Overwriting block with name '{block.name}'")

        self.blocks[block.name] = block

    def __len__(self) -> int:
        return len(self.blocks)
