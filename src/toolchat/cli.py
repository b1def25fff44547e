"""toolchat CLI entrypoint."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from toolchat import __version__
from toolchat.utils.telemetry import configure_telemetry


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through rich; DEBUG with ``-v``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="toolchat")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TOOLCHAT_CONFIG",
    default=None,
    help="Server registry file (YAML or JSON).",
)
@click.option(
    "--otel-endpoint",
    envvar="TOOLCHAT_OTEL_ENDPOINT",
    default=None,
    help="Export spans over OTLP/gRPC to this endpoint (needs toolchat[otel]).",
)
@click.option("--trace-console", is_flag=True, help="Print spans as JSON to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    config_path: Path | None,
    otel_endpoint: str | None,
    trace_console: bool,
) -> None:
    """toolchat: talk to MCP tool servers in plain words."""
    configure_logging(verbose)
    try:
        configure_telemetry(otlp_endpoint=otel_endpoint, console=trace_console)
    except ImportError as exc:
        Console(stderr=True).print(f"[red]Telemetry error:[/red] {escape(str(exc))}")
        sys.exit(1)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register subcommands
from toolchat.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
