"""``toolchat ask``: one chat turn against a server."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.markup import escape

from toolchat.cli_commands._common import connection_options
from toolchat.cli_commands._output import console, print_reply
from toolchat.core.session import Reply
from toolchat.protocols.errors import ProtocolError


@click.command()
@click.argument("server_url")
@click.argument("utterance")
@connection_options
@click.option("--name", default=None, help="Server name used in help texts.")
@click.option("--handshake", is_flag=True, help="Send 'initialize' before discovery.")
@click.option("--raw", is_flag=True, help="Print the markdown source instead of rendering it.")
def ask(
    server_url: str,
    utterance: str,
    token: str | None,
    origin: str | None,
    name: str | None,
    handshake: bool,
    raw: bool,
) -> None:
    """Resolve UTTERANCE against SERVER_URL's tools and run the match."""
    from toolchat.core.session import CommandSession
    from toolchat.protocols.mcp.client import MCPClient

    async def _ask() -> Reply:
        client = MCPClient.from_url(
            server_url,
            name=name or "",
            token=token,
            origin=origin,
            handshake=handshake,
        )
        async with client:
            session = CommandSession(client, server_name=name)
            return await session.handle(utterance)

    try:
        reply = asyncio.run(_ask())
    except ProtocolError as exc:
        console.print(f"[red]Connection error:[/red] {escape(str(exc))}")
        sys.exit(1)
    print_reply(reply, raw=raw)
    if reply.role == "error":
        sys.exit(1)
