"""Utility functions for Holograph.

This module contains the filesystem and string helpers shared by the build.

Key functions:
    rglob: Recursively find files matching a glob pattern.
    find_source_files: List the stylesheet and markdown sources of a project.
    titleize: Convert filenames to human-readable titles.
    ucfirst: Upper-case the first character of a string.
    ensure_dir: Ensure a directory exists.
    read_source: Read a source file, reporting decode errors as BuildError.
    is_markdown: Check if a path is a Markdown file.
    is_stylesheet: Check if a path is a CSS file.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import BuildError

SOURCE_PATTERNS = ("*.css", "*.md")


def is_filesystem_root(path: Path | str) -> bool:
    """Check whether a path names a filesystem root.

    Args:
        path: Path to check.

    Returns:
        True for ``/``, ``\\`` and any path equal to its own anchor
        (``C:\\`` on Windows).
    """
    if str(path) in ("/", "\\"):
        return True
    path = Path(path)
    return bool(path.anchor) and path == Path(path.anchor)


def rglob(pattern: str, root: Path | str) -> list[Path]:
    """Recursively find files matching a glob pattern.

    Searching from a filesystem root is refused and returns an empty list,
    as does a root that is not a directory.

    Args:
        pattern: Glob pattern matched against file names (e.g. ``*.css``).
        root: Directory to search under.

    Returns:
        Sorted, deduplicated list of matching file paths.

    Examples:
        >>> rglob("*.css", "/")
        []
    """
    if is_filesystem_root(root):
        return []
    root = Path(root)
    if not root.is_dir():
        return []
    found = {path for path in root.rglob(pattern) if path.is_file()}
    return sorted(found, key=str)


def find_source_files(source_dir: Path | str) -> list[Path]:
    """List all stylesheet and markdown files under the source directory.

    Args:
        source_dir: Directory holding the documented stylesheets.

    Returns:
        Sorted list of source file paths.
    """
    files: set[Path] = set()
    for pattern in SOURCE_PATTERNS:
        files.update(rglob(pattern, source_dir))
    return sorted(files, key=str)


def ucfirst(text: str) -> str:
    """Upper-case the first character of a string, leaving the rest alone."""
    return text[:1].upper() + text[1:]


def titleize(filename: str) -> str:
    """Convert a filename to a human-readable title.

    Replaces hyphens and underscores with spaces and capitalizes each word.

    Args:
        filename: Filename with or without extension.

    Returns:
        Human-readable title string.

    Examples:
        >>> titleize("getting-started.md")
        'Getting Started'
    """
    base = Path(filename).stem
    words = re.split(r"[\s\-_]+", base)
    return " ".join(word.capitalize() for word in words if word) or "Untitled"


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating parents as needed.

    Args:
        path: Directory path to create.

    Returns:
        The same path, for chaining.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        BuildError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BuildError(path, f"File is not valid UTF-8: {exc.reason}", exc) from exc
    except OSError as exc:
        raise BuildError(path, f"Could not read file: {exc.strerror or exc}", exc) from exc


def is_markdown(path: Path) -> bool:
    """Check if a path is a Markdown file.

    Args:
        path: Path to check.

    Returns:
        True if the file has .md extension (case-insensitive).
    """
    return path.suffix.lower() == ".md"


def is_stylesheet(path: Path) -> bool:
    """Check if a path is a CSS file."""
    return path.suffix.lower() == ".css"
