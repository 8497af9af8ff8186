"""Configuration handling for Holograph.

The configuration is a plain dictionary read from ``holograph.yml``. Unset
keys keep their defaults; unknown keys are preserved but unused.

Key functions:
- merge_config: Apply overrides on top of the defaults.
- load_config: Read the configuration file.
- annotated_config: Render a commented configuration file for ``init``.
- get_option: Read one option, ``""`` when it is not set.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .protocols import Logger

DEFAULT_CONFIG_FILE = "holograph.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "title": "Style Guide",
    "source": "./components",
    "destination": "./docs",
    "documentation_assets": "./templates",
    "compat_mode": False,
    "dependencies": ["./build"],
    "preprocessor": "minify",
    "build": "./build/css",
    "main_stylesheet": "build/css/screen.css",
    "port": "3232",
}

CONFIG_COMMENTS = {
    "title": "The title for this styleguide",
    "source": "The directory containing the source files to parse",
    "destination": "Directory to build the final HTML files",
    "documentation_assets": "The assets (layout, css, js) for the documentation pages",
    "compat_mode": "Use header.html and footer.html instead of layout.html",
    "dependencies": "Any other asset folders that need to be copied to the destination folder",
    "preprocessor": "Preprocessor for the stylesheets: 'minify' or 'none'",
    "build": "The build directory for the compiled stylesheets",
    "main_stylesheet": "The main stylesheet to link to from the documentation pages",
    "port": "Port for the 'live' and 'serve' commands",
}


def merge_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Apply configuration overrides on top of the defaults.

    Args:
        overrides: Values to override; keys not in the defaults are kept.

    Returns:
        A new configuration dictionary.
    """
    config = {
        key: list(value) if isinstance(value, list) else value
        for key, value in DEFAULT_CONFIG.items()
    }
    if overrides:
        config.update(overrides)
    return config


def load_config(
    path: Path,
    strict: bool = False,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """Load the configuration file.

    Args:
        path: Path to the YAML configuration file.
        strict: Raise when the file is missing instead of using defaults.
        logger: Receives a warning when the file is missing.

    Returns:
        Dictionary containing configuration values, with defaults applied.

    Raises:
        ConfigError: If the file is missing in strict mode, cannot be parsed,
            or does not contain a mapping.
    """
    if not path.exists():
        if strict:
            raise ConfigError(f"Config file '{path}' not found")
        if logger is not None:
            logger.warning(f"Config file '{path}' not found; using defaults")
        return merge_config()

    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse config file '{path}': {exc}") from exc

    if loaded is None:
        return merge_config()
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")
    return merge_config(loaded)


def get_option(config: dict[str, Any], key: str) -> Any:
    """Return one configuration value, or ``""`` when it is not set."""
    return config.get(key, "")


def annotated_config(config: dict[str, Any] | None = None) -> str:
    """Render a configuration file with a comment above each known option.

    Args:
        config: Configuration to render; defaults when omitted.

    Returns:
        YAML text suitable for writing to ``holograph.yml``.
    """
    config = merge_config(config)
    lines = ["# Holograph configuration", ""]
    for key, value in config.items():
        comment = CONFIG_COMMENTS.get(key)
        if comment:
            lines.append(f"# {comment}")
        dumped = yaml.safe_dump({key: value}, default_flow_style=False, sort_keys=False)
        lines.append(dumped.rstrip("\n"))
        lines.append("")
    return "\n".join(lines)


def dump_config(config: dict[str, Any]) -> str:
    """Render a configuration dictionary as YAML."""
    return yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
