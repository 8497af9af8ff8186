"""Exceptions raised by Holograph.

Key classes:
- HolographError: Base class for every error the CLI reports as fatal.
- ConfigError: Invalid or missing configuration.
- InvalidBlockError: A doc block without a usable name.
- BuildError: Error during a build with the offending source file attached.
"""

from __future__ import annotations

from pathlib import Path


class HolographError(Exception):
    """Base class for fatal Holograph errors."""


class ConfigError(HolographError):
    """Configuration file or option that cannot be used."""


class InvalidBlockError(HolographError, ValueError):
    """Doc block front matter without a ``name``."""


class BuildError(HolographError):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the source file that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")
