"""Protocol definitions for Holograph.

This module defines the interfaces (protocols) the build depends on, so that
callers can hand in their own implementations.

These protocols enable:
- Passing the logger into every build instead of sharing verbosity globally
- Swapping the fenced code block convention independent of the markdown engine
- Easy testing through in-memory implementations
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Protocol for reporting build progress and problems.

    Implementations decide where messages go and which levels are shown.
    """

    @abstractmethod
    def error(self, message: str) -> None:
        """Report an error."""
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a recoverable problem."""
        ...

    @abstractmethod
    def notice(self, message: str) -> None:
        """Report a regular progress message."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Report a verbose diagnostic message."""
        ...


@runtime_checkable
class FencedCodeHandler(Protocol):
    """Protocol for rendering fenced code blocks.

    The markdown renderer delegates every fenced block to one handler, which
    owns the markup conventions (language classes, line numbers, live
    examples).
    """

    @abstractmethod
    def render(self, code: str, info: str | None = None) -> str:
        """Render a fenced code block to HTML.

        Args:
            code: Raw content of the code block.
            info: Text following the opening fence (e.g. ``html_example,4``).

        Returns:
            HTML string for the block.
        """
        ...
