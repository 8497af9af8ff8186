"""Asset copying for Holograph.

The documentation pages need the subdirectories of the documentation assets
directory (``static/`` with the documentation stylesheet) and every
configured dependency directory (the compiled stylesheets) next to them in
the destination directory.

Key class:
- AssetPipeline: Replaces each asset directory in the destination with a
  fresh copy.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigError
from .protocols import Logger


def resolve_asset_dir(project_root: Path, value: str | Path) -> Path:
    """Resolve a configured asset directory against the project root.

    Args:
        project_root: Directory relative paths are resolved against.
        value: Configured directory, e.g. ``./build``.

    Returns:
        The resolved directory.

    Raises:
        ConfigError: If the configured value has no explicit directory name.
    """
    if Path(value).name in ("", ".", ".."):
        raise ConfigError(f"Asset directory '{value}' must be named explicitly to be copied")
    return project_root / value


def asset_subdirectories(assets_dir: Path) -> list[Path]:
    """List the directories directly inside the documentation assets directory."""
    if not assets_dir.is_dir():
        return []
    return sorted(path for path in assets_dir.iterdir() if path.is_dir())


class AssetPipeline:
    """Copies asset directories into the destination directory.

    Attributes:
        destination: Directory holding the generated documentation.
        logger: Receives progress messages.
    """

    def __init__(self, destination: Path, logger: Logger):
        self.destination = destination
        self.logger = logger

    def run(self, asset_dirs: Iterable[Path]) -> list[Path]:
        """Copy every existing asset directory to the destination.

        A previous copy with the same name is removed first. Entries that do
        not exist or are not directories are skipped.

        Args:
            asset_dirs: Directories to copy.

        Returns:
            Paths of the copies in the destination.

        Raises:
            ConfigError: If a directory has no explicit name (``.``, ``..``
                or a filesystem root), which would replace the whole
                destination.
        """
        self.logger.notice(f"Copying assets to dest dir '{self.destination}'...")
        copied = []
        for path in asset_dirs:
            path = Path(path)
            if path.name in ("", ".", ".."):
                raise ConfigError(
                    f"Asset directory '{path}' must be named explicitly to be copied"
                )
            if not path.is_dir():
                self.logger.info(f"Skipping missing asset dir '{path}'")
                continue

            target = self.destination / path.name
            if target.exists():
                self.logger.info(f"Removing '{target}'")
                shutil.rmtree(target)
            self.logger.info(f"Copying '{path}' to '{target}'")
            shutil.copytree(path, target)
            copied.append(target)
        return copied
