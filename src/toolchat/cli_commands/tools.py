"""``toolchat tools``: discover tools and preview how text resolves."""

from __future__ import annotations

import asyncio
import sys

import click

from toolchat.cli_commands._common import connection_options
from toolchat.cli_commands._output import console, print_match, print_tools_table
from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.errors import ProtocolError


@click.group()
def tools() -> None:
    """Discover and inspect tools."""


def _fetch_catalog(server_url: str, token: str | None, origin: str | None) -> ToolCatalog:
    from toolchat.protocols.mcp.client import MCPClient

    async def _discover() -> ToolCatalog:
        async with MCPClient.from_url(server_url, token=token, origin=origin) as client:
            return await client.refresh_catalog()

    try:
        return asyncio.run(_discover())
    except ProtocolError as exc:
        console.print(f"[red]Discovery error:[/red] {exc}")
        sys.exit(1)


@tools.command("discover")
@click.argument("server_url")
@connection_options
def discover(server_url: str, token: str | None, origin: str | None) -> None:
    """List the tools SERVER_URL advertises."""
    catalog = _fetch_catalog(server_url, token, origin)
    if not catalog:
        console.print("[yellow]No tools discovered.[/yellow]")
        return

    print_tools_table(catalog)


@tools.command("match")
@click.argument("server_url")
@click.argument("utterance")
@connection_options
def match(server_url: str, utterance: str, token: str | None, origin: str | None) -> None:
    """Show which tool UTTERANCE resolves to, without invoking it."""
    from toolchat.core.matching import resolve

    catalog = _fetch_catalog(server_url, token, origin)
    print_match(resolve(utterance, catalog))
