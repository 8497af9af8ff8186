"""Markdown rendering for Holograph.

Pages are assembled from markdown mixed with raw HTML and rendered with
mistune. Fenced code blocks are delegated to a FencedCodeHandler, so the
live example convention can be replaced without touching the markdown engine.

A fence whose language contains ``example`` renders twice: once as live
HTML and once as a source listing::

    ```html_example,4
    <button class="btn">Click</button>
    ```

The optional ``,N`` suffix adds a ``linenums:N`` class to the ``<pre>``.

Key classes:
- ExampleCodeHandler: Default fenced code block markup.
- MarkdownRenderer: Renders page content to HTML.
"""

from __future__ import annotations

import html
import re

import mistune

from .protocols import FencedCodeHandler

FENCE_INFO_RE = re.compile(r"^([\w-]+)?(?:,\s?(\d+))?\s*$")


def parse_fence_info(info: str | None) -> tuple[str, str]:
    """Split a fence info string into language and starting line number.

    Args:
        info: Text after the opening fence, e.g. ``html,21``.

    Returns:
        Tuple of (language, line number); either may be empty.

    Examples:
        >>> parse_fence_info("css_example, 3")
        ('css_example', '3')
    """
    match = FENCE_INFO_RE.match((info or "").strip())
    if not match:
        return "", ""
    return match.group(1) or "", match.group(2) or ""


def _highlight(code: str, language: str) -> str:
    """Highlight code with pygments, falling back to plain escaping."""
    lexer_name = language.replace("example", "").strip("_-")
    if lexer_name:
        from pygments import highlight
        from pygments.formatters import HtmlFormatter
        from pygments.lexers import get_lexer_by_name
        from pygments.util import ClassNotFound

        try:
            lexer = get_lexer_by_name(lexer_name)
        except ClassNotFound:
            pass
        else:
            return highlight(code, lexer, HtmlFormatter(nowrap=True))
    return html.escape(code, quote=False)


class ExampleCodeHandler:
    """Renders fenced code blocks, with live output for example blocks.

    Attributes:
        highlight: Run the listing through pygments when a lexer exists.
    """

    def __init__(self, highlight: bool = True):
        self.highlight = highlight

    def render(self, code: str, info: str | None = None) -> str:
        language, line_number = parse_fence_info(info)

        classes = ["prettyprint"]
        if language:
            classes.append(f"language-{language}")
        if line_number:
            classes.append(f"linenums:{line_number}")

        listing = _highlight(code, language) if self.highlight else html.escape(code, quote=False)
        code_block = (
            f'<div class="codeBlock"><pre class="{" ".join(classes)}">{listing}</pre></div>'
        )

        if "example" not in language:
            return code_block + "\n"

        return (
            '<div class="codeExample">'
            f'<div class="exampleOutput">{code}</div>'
            f"{code_block}"
            "</div>\n"
        )


class _FencedCodeRenderer(mistune.HTMLRenderer):
    """mistune HTML renderer passing raw HTML through and delegating code blocks.

    Attributes:
        code_handler: Handler producing the markup for fenced code blocks.
    """

    def __init__(self, code_handler: FencedCodeHandler):
        super().__init__(escape=False)
        self.code_handler = code_handler

    def block_code(self, code: str, info: str | None = None) -> str:
        return self.code_handler.render(code, info)


class MarkdownRenderer:
    """Renders assembled page content to HTML."""

    def __init__(self, code_handler: FencedCodeHandler | None = None):
        """Initialize the renderer.

        Args:
            code_handler: Fenced code block handler; ExampleCodeHandler when
                omitted.
        """
        self.code_handler = code_handler or ExampleCodeHandler()

    def render(self, content: str) -> str:
        """Render markdown content to HTML.

        Args:
            content: Markdown interleaved with raw HTML.

        Returns:
            Rendered HTML.
        """
        markdown = mistune.create_markdown(
            renderer=_FencedCodeRenderer(self.code_handler),
            plugins=["strikethrough", "table", "url"],
        )
        return markdown(content)
