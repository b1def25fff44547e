"""``toolchat servers``: the configured server registry."""

from __future__ import annotations

import asyncio

import click

from toolchat.cli_commands._common import load_registry
from toolchat.cli_commands._output import console, print_servers_table, print_status_table
from toolchat.core.catalog import ToolCatalog


@click.group()
def servers() -> None:
    """Inspect configured servers."""


@servers.command("list")
@click.pass_context
def list_servers(ctx: click.Context) -> None:
    """List configured servers."""
    registry = load_registry(ctx)
    if not registry.servers:
        console.print("[yellow]No servers configured.[/yellow]")
        return
    print_servers_table(registry)


@servers.command("status")
@click.option(
    "--token",
    envvar="TOOLCHAT_TOKEN",
    default=None,
    help="Bearer credential sent to every server without its own token.",
)
@click.pass_context
def status(ctx: click.Context, token: str | None) -> None:
    """Discover every configured server concurrently and report tool counts."""
    from toolchat.protocols.dispatcher import ServerDispatcher
    from toolchat.protocols.mcp.client import MCPClient

    registry = load_registry(ctx)
    if not registry.servers:
        console.print("[yellow]No servers configured.[/yellow]")
        return

    async def _status() -> dict[str, ToolCatalog | BaseException]:
        dispatcher = ServerDispatcher()
        for ref in registry.servers:
            dispatcher.register(ref.id, MCPClient.from_ref(ref, token=ref.token or token))
        try:
            return await dispatcher.refresh_all()
        finally:
            await dispatcher.close_all()

    print_status_table(registry, asyncio.run(_status()))
