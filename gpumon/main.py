"""
gpumon: CLI entrypoint.

Usage:
    gpumon              # same as `gpumon watch`
    gpumon watch
    gpumon detect
    python -m gpumon.main --help
"""

from __future__ import annotations

import os
import sys

import click

from gpumon import __version__
from gpumon.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gpumon")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """gpumon: detect the GPU, install its monitoring tool, print utilization."""
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
        quiet_third_party=not debug,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(watch)


@cli.command()
def watch() -> None:
    """Bootstrap the monitoring tool, then print utilization every second."""
    from gpumon.core.use_cases.monitor import watch as run_watch

    try:
        result = run_watch(echo=click.echo)
    except KeyboardInterrupt:
        click.echo()
        click.secho("Stopped.", fg="yellow")
        sys.exit(130)

    # Only reachable on error: the poll loop has no other exit.
    click.secho(f"❌ {result.error}", fg="red")
    sys.exit(1)


@cli.command()
def detect() -> None:
    """Show GPU vendor, tool presence and package manager. Installs nothing."""
    from gpumon.core.use_cases.monitor import bootstrap

    result = bootstrap(echo=click.echo, install=False)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.tool_found:
        click.secho("✅ Ready to monitor", fg="green")
    else:
        click.secho(
            f"⚠️  Monitoring tool missing; `gpumon watch` will install it with {result.package_manager}",
            fg="yellow",
        )


if __name__ == "__main__":
    cli()
