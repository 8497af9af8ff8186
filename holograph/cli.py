"""Command-line interface for Holograph.

This module defines the CLI commands using Click framework.

Commands:
- init: Write a commented holograph.yml into the current directory.
- config: Show the configuration in effect.
- build: Build the style guide.
- live: Serve the style guide, rebuilding on every page request.
- serve: Build once and serve the style guide.
- help: Show program help.
- version: Show the program version.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

import click
import questionary

from . import __version__
from .config import DEFAULT_CONFIG_FILE, annotated_config, dump_config, load_config
from .errors import BuildError, HolographError
from .logger import TerminalLogger


def version_string() -> str:
    return f"Holograph {__version__}"


@click.group(invoke_without_command=True)
@click.option(
    "-c",
    "--conf",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Use an alternate configuration file (default: {DEFAULT_CONFIG_FILE})",
)
@click.option("-q", "--quiet", is_flag=True, help="Quiet mode (only show warnings and errors)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--compat", is_flag=True, help="Use header.html/footer.html instead of layout.html")
@click.version_option(version=__version__, prog_name="Holograph", message="%(prog)s %(version)s")
@click.pass_context
def cli(ctx: click.Context, conf: Path | None, quiet: bool, verbose: bool, compat: bool):
    """A markdown based documentation system for OOCSS."""
    ctx.ensure_object(dict)
    ctx.obj.update(
        conf=conf,
        compat=compat,
        logger=TerminalLogger(quiet=quiet, verbose=verbose),
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.pass_context
def init(ctx: click.Context):
    """Write a commented configuration file."""
    target = ctx.obj["conf"] or Path.cwd() / DEFAULT_CONFIG_FILE
    if target.exists():
        overwrite = questionary.confirm(
            f"{target.name} already exists. Overwrite it?",
            default=False,
        ).ask()
        if not overwrite:
            raise click.Abort()
    target.write_text(annotated_config(), encoding="utf-8")
    click.echo(f"Wrote configuration to {target}")


@cli.command()
@click.pass_context
def config(ctx: click.Context):
    """Show the configuration in effect."""
    click.echo(dump_config(_load_config(ctx)), nl=False)


@cli.command()
@click.pass_context
def build(ctx: click.Context):
    """Build the style guide HTML/CSS."""
    from .build import BuildStatus, build_site

    logger = ctx.obj["logger"]
    settings = _load_config(ctx)
    try:
        result = build_site(Path.cwd(), settings, logger)
    except HolographError as exc:
        _fail(exc)
    if result.status is BuildStatus.NOTHING_FOUND:
        logger.notice("Nothing to build.")
        raise SystemExit(int(result.status))
    logger.notice(f"Built {len(result.pages)} pages into {result.output_dir}")


@cli.command()
@click.option("--port", type=int, required=False, help="Port to serve on (overrides config)")
@click.pass_context
def live(ctx: click.Context, port: int | None):
    """Serve the style guide, rebuilding on every page request."""
    _serve(ctx, port, rebuild=True)


@cli.command()
@click.option("--port", type=int, required=False, help="Port to serve on (overrides config)")
@click.pass_context
def serve(ctx: click.Context, port: int | None):
    """Build once and serve the style guide."""
    _serve(ctx, port, rebuild=False)


@cli.command(name="help")
@click.pass_context
def help_command(ctx: click.Context):
    """Display program help and exit."""
    click.echo(version_string())
    click.echo(ctx.parent.get_help())


@cli.command()
def version():
    """Display program version and exit."""
    click.echo(version_string())


def _read_config(ctx: click.Context) -> dict[str, Any]:
    """Read the configuration selected on the command line.

    An explicit ``--conf`` file must exist; the default file is optional.

    Raises:
        ConfigError: If the configuration file cannot be used.
    """
    conf = ctx.obj["conf"]
    path = conf or Path.cwd() / DEFAULT_CONFIG_FILE
    settings = load_config(path, strict=conf is not None, logger=ctx.obj["logger"])
    if ctx.obj["compat"]:
        settings["compat_mode"] = True
    return settings


def _load_config(ctx: click.Context) -> dict[str, Any]:
    try:
        return _read_config(ctx)
    except HolographError as exc:
        _fail(exc)


def _serve(ctx: click.Context, port: int | None, rebuild: bool) -> None:
    from .server import LiveServer

    server = LiveServer(
        Path.cwd(),
        _load_config(ctx),
        ctx.obj["logger"],
        port=port,
        rebuild=rebuild,
        config_loader=functools.partial(_read_config, ctx),
    )
    try:
        server.start()
    except HolographError as exc:
        _fail(exc)


def _fail(exc: HolographError) -> None:
    """Report a fatal error and exit with status 1."""
    click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
    if isinstance(exc, BuildError):
        click.echo(click.style(f"  File: {exc.source_path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
    else:
        click.echo(click.style(f"  Error: {exc}", fg="white"), err=True)
    raise SystemExit(1) from None


def main():
    """Entry point for the CLI application."""
    cli()
