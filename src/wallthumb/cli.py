"""Click CLI for wallthumb: generate and maintain wallpaper thumbnails."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wallthumb.config.loader import load_cache_config, resolve_log_level
from wallthumb.config.schema import ThumbnailCacheConfig
from wallthumb.errors.exceptions import ConfigError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: int = logging.WARNING) -> None:
    """Configure logging based on verbosity level.

    Without -v the configured ``log_level`` applies.
    """
    level = default_level
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )
    logging.getLogger("wallthumb").setLevel(level)


def _resolve_config(ctx: click.Context) -> ThumbnailCacheConfig:
    """Build the cache config from the group options, exiting on bad input."""
    opts = ctx.obj or {}
    try:
        return load_cache_config(
            config_file=opts.get("config_file"),
            cache_dir=opts.get("cache_dir"),
        )
    except (ConfigError, FileNotFoundError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="wallthumb")
@click.option(
    "--cache-dir", type=click.Path(file_okay=False, path_type=Path), help="Thumbnail cache directory."
)
@click.option(
    "--config", "config_file", type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, cache_dir: Path | None, config_file: Path | None, verbose: int) -> None:
    """wallthumb: cached wallpaper thumbnails."""
    try:
        default_level = resolve_log_level(config_file) if verbose == 0 else logging.WARNING
    except (ConfigError, FileNotFoundError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    _setup_logging(verbose, default_level)
    ctx.ensure_object(dict)
    ctx.obj["cache_dir"] = cache_dir
    ctx.obj["config_file"] = config_file


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_context
def generate(ctx: click.Context, paths: tuple[Path, ...]) -> None:
    """Generate (or reuse) thumbnails for wallpaper images."""
    from wallthumb.core import ThumbnailCache

    cache = ThumbnailCache(_resolve_config(ctx))
    pairs = asyncio.run(cache.list_with_thumbnails(paths))

    table = Table(title="Thumbnails", show_header=True)
    table.add_column("Original", style="cyan")
    table.add_column("Thumbnail")

    fallbacks = 0
    for pair in pairs:
        if pair.thumbnail == pair.original:
            fallbacks += 1
            table.add_row(str(pair.original), "[yellow](original)[/yellow]")
        else:
            table.add_row(str(pair.original), str(pair.thumbnail))

    console.print(table)
    if fallbacks:
        error_console.print(f"[yellow]{fallbacks} image(s) could not be thumbnailed.[/yellow]")


@cli.group()
def cache() -> None:
    """Cache management commands."""


@cache.command("stats")
@click.pass_context
def cache_stats(ctx: click.Context) -> None:
    """Show cache statistics."""
    from wallthumb.core import ThumbnailCache

    thumbs = ThumbnailCache(_resolve_config(ctx))
    stats = thumbs.get_cache_stats()

    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    table.add_row("Entries", str(stats.count))
    table.add_row("Size (bytes)", f"{stats.total_size_bytes:,}")
    table.add_row("Size (MB)", f"{stats.size_mb:.2f}")
    table.add_row("Location", str(thumbs.config.cache_dir))

    console.print(table)


@cache.command("prune")
@click.pass_context
def cache_prune(ctx: click.Context) -> None:
    """Remove thumbnails not accessed within the retention window."""
    from wallthumb.core import ThumbnailCache

    thumbs = ThumbnailCache(_resolve_config(ctx))
    removed = thumbs.clear_old_thumbnails()
    console.print(
        f"[green]Removed {removed} thumbnail(s) older than {thumbs.config.ttl_days:g} days.[/green]"
    )


@cache.command("clear")
@click.confirmation_option(prompt="Are you sure you want to clear the thumbnail cache?")
@click.pass_context
def cache_clear(ctx: click.Context) -> None:
    """Clear all cached thumbnails."""
    from wallthumb.core import ThumbnailCache

    thumbs = ThumbnailCache(_resolve_config(ctx))
    removed = thumbs.clear_all_thumbnails()
    console.print(f"[green]Cache cleared ({removed} thumbnail(s) removed).[/green]")


def main() -> None:
    """Entry point for the CLI."""
    cli()
