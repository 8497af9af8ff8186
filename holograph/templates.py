"""Page layout rendering for Holograph.

This module uses Jinja2 to wrap rendered page content in the documentation
layout. Layout files come from the configured documentation assets directory,
falling back to the templates bundled with the package.

Two layout modes exist:
- layout mode: a single ``layout.html`` with ``{{title}}``,
  ``{{main_stylesheet}}``, ``{{navigation}}`` and ``{{content}}`` placeholders.
- compat mode: ``header.html`` and ``footer.html`` concatenated around the
  content.

Key class:
- LayoutRenderer: Renders full HTML pages from page content.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .protocols import Logger

BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "templates" / "default"

LAYOUT_TEMPLATE = "layout.html"
HEADER_TEMPLATE = "header.html"
FOOTER_TEMPLATE = "footer.html"


class LayoutRenderer:
    """Renders pages into the documentation layout.

    Attributes:
        assets_dir: Documentation assets directory holding the layout files.
        compat_mode: Use header/footer fragments instead of the layout.
        env: Jinja2 environment searching assets_dir, then the built-ins.
    """

    def __init__(self, assets_dir: Path, logger: Logger, compat_mode: bool = False):
        self.assets_dir = assets_dir
        self.logger = logger
        self.compat_mode = compat_mode
        self.env = Environment(
            loader=FileSystemLoader([str(assets_dir), str(BUILTIN_TEMPLATES_DIR)]),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.env.globals["pygments_css"] = self._pygments_css
        self._checked: set[str] = set()

    @staticmethod
    def _pygments_css() -> Markup:
        """Return Pygments CSS styles for the highlighted code listings."""
        from pygments.formatters import HtmlFormatter

        return Markup(HtmlFormatter().get_style_defs(".codeBlock pre"))

    def _template(self, name: str):
        if name not in self._checked:
            self._checked.add(name)
            if not (self.assets_dir / name).is_file():
                self.logger.warning(
                    f"Template '{name}' not found in '{self.assets_dir}'; using the built-in default"
                )
        return self.env.get_template(name)

    def render(
        self,
        content: str,
        title: str = "",
        main_stylesheet: str = "",
        navigation: str = "",
    ) -> str:
        """Render a full HTML page.

        Args:
            content: Rendered HTML of the page body.
            title: Style guide title.
            main_stylesheet: Path of the stylesheet the page links to.
            navigation: Rendered navigation HTML.

        Returns:
            Complete HTML document.
        """
        context = {
            "title": title,
            "main_stylesheet": main_stylesheet,
            "navigation": Markup(navigation),
            "content": Markup(content),
        }
        if not self.compat_mode:
            return self._template(LAYOUT_TEMPLATE).render(**context)

        header = self._template(HEADER_TEMPLATE).render(**context)
        footer = self._template(FOOTER_TEMPLATE).render(**context)
        return header + content + footer
