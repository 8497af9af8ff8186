"""Stylesheet preprocessors for Holograph.

A preprocessor turns the source stylesheets into the main stylesheet the
documentation pages link to.

Key classes:
- BasePreprocessor: Base class holding the source and destination directories.
- MinifyPreprocessor: Compresses every stylesheet and concatenates them.
- NonePreprocessor: Leaves the stylesheets alone.

Key functions:
- create_preprocessor: Look up a preprocessor by its configuration name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import csscompressor

from .errors import ConfigError
from .utils import ensure_dir, rglob


class BasePreprocessor(ABC):
    """Base class for stylesheet preprocessors.

    Attributes:
        source_dir: Directory holding the source stylesheets.
        destination_dir: Directory receiving the compiled stylesheets.
    """

    def __init__(self, source_dir: Path | None = None, destination_dir: Path | None = None):
        self.source_dir = source_dir
        self.destination_dir = destination_dir

    @abstractmethod
    def execute(self, options: dict[str, Any] | None = None) -> bool | None:
        """Run the preprocessor.

        Args:
            options: Extra options; ``main_stylesheet`` names the output file.

        Returns:
            True if a stylesheet was written, False if there was nothing to
            process, None if the preprocessor does nothing.
        """
        ...


class MinifyPreprocessor(BasePreprocessor):
    """Minifies all source stylesheets into one main stylesheet."""

    def execute(self, options: dict[str, Any] | None = None) -> bool:
        options = options or {}
        css_files = rglob("*.css", self.source_dir)
        if not css_files:
            return False

        ensure_dir(self.destination_dir)

        buffer = [
            csscompressor.compress(path.read_text(encoding="utf-8")) for path in css_files
        ]

        main_stylesheet = Path(options["main_stylesheet"])
        ensure_dir(main_stylesheet.parent)
        main_stylesheet.write_text("\n".join(buffer), encoding="utf-8")
        return True


class NonePreprocessor(BasePreprocessor):
    """Skips stylesheet processing entirely."""

    def execute(self, options: dict[str, Any] | None = None) -> None:
        return None


PREPROCESSORS: dict[str, type[BasePreprocessor]] = {
    "minify": MinifyPreprocessor,
    "none": NonePreprocessor,
}


def create_preprocessor(
    name: str, source_dir: Path | None = None, destination_dir: Path | None = None
) -> BasePreprocessor:
    """Create the preprocessor configured under ``name``.

    Args:
        name: ``minify`` or ``none``.
        source_dir: Directory holding the source stylesheets.
        destination_dir: Directory receiving the compiled stylesheets.

    Returns:
        The preprocessor instance.

    Raises:
        ConfigError: If no preprocessor has that name.
    """
    key = str(name).strip().lower()
    if key not in PREPROCESSORS:
        raise ConfigError(
            f"Unknown preprocessor '{name}'; expected one of: {', '.join(PREPROCESSORS)}"
        )
    return PREPROCESSORS[key](source_dir, destination_dir)
