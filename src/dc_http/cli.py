#!/usr/bin/env python3
"""
dc-http CLI - inspect the effective server configuration
"""

import json
import os
import sys
from pathlib import Path
from typing import Tuple

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dc_http._version import __version__
from dc_http.core.config_store import DEFAULT_CONFIG_PATH
from dc_http.core.exceptions import DcHttpError
from dc_http.core.logging import logger
from dc_http.core.secure_config import ConfigResolver, release
from dc_http.models.config import CONFIG_FIELDS, new_default_config

# Server options (--port=..., --root-dir=...) are handed to the resolver untouched
PASSTHROUGH = {"ignore_unknown_options": True, "allow_extra_args": True}


@click.group()
@click.version_option(version=__version__, prog_name="dc-http")
def cli():
    """dc-http - runtime configuration for the HTTP server"""
    pass


@cli.command(context_settings=PASSTHROUGH)
@click.option('--json', 'as_json', is_flag=True, help='Print the configuration as JSON')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def show(as_json: bool, args: Tuple[str, ...]):
    """Show the effective configuration and where each value came from"""
    resolver = ConfigResolver()
    cfg = resolver.resolve(list(args))
    try:
        values = cfg.as_dict()
        sources = cfg.sources

        if as_json:
            click.echo(json.dumps({"config": values, "sources": sources}, indent=2))
            return

        table = Table(title="dc-http configuration")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_column("Source", style="dim")
        for field in CONFIG_FIELDS:
            table.add_row(field, escape(str(values[field])), sources[field])

        console = Console()
        console.print(table)
        console.print(f"[dim]Config file: {escape(resolver.config_file_path(list(args)))}[/dim]")
    finally:
        release(cfg)


@cli.command(context_settings=PASSTHROUGH)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def check(args: Tuple[str, ...]):
    """Resolve the configuration and exit non-zero if it is unusable"""
    cfg = ConfigResolver().resolve(list(args))
    try:
        click.echo(
            click.style(
                f"✓ Configuration OK: serving {cfg.root_dir} on port {cfg.port} ({cfg.mode.value} mode)",
                fg="green",
            )
        )
    finally:
        release(cfg)


@cli.command()
@click.option('--path', default=DEFAULT_CONFIG_PATH, help='Where to write the config file')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init(path: str, force: bool):
    """Write a configuration file holding the defaults"""
    target = Path(path)
    if target.exists() and not force:
        click.echo(click.style(f"✗ {target} already exists (use --force to overwrite)", fg="red"))
        sys.exit(1)

    cfg = new_default_config()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(yaml.safe_dump(cfg.as_dict(), sort_keys=False), encoding="utf-8")
    except OSError as e:
        click.echo(click.style(f"✗ Failed to write {target}: {e}", fg="red"))
        sys.exit(1)
    finally:
        release(cfg)

    logger.info("Config file written", file=str(target))
    click.echo(click.style(f"✓ Wrote {target}", fg="green"))


def main():
    """Main entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(0)
    except DcHttpError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        if os.environ.get('DC_HTTP_DEBUG'):
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
