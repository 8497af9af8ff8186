"""Holograph style guide generator.

This package builds a static documentation site from the doc blocks embedded
in stylesheet comments and from plain markdown files.

The main entry point is the CLI module, which provides commands for writing a
configuration file, building the documentation, and serving it locally with a
rebuild on every page request.
"""

__all__ = ["__version__"]
__version__ = "0.9.0"
