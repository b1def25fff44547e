"""ServerDispatcher: routes calls to the client of the right server."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from toolchat.core.catalog import ToolCatalog
    from toolchat.protocols.mcp.client import MCPClient
    from toolchat.protocols.mcp.models import ToolCallResult

logger = logging.getLogger(__name__)


class ServerDispatcher:
    """Keeps one :class:`MCPClient` per server id.

    Usage::

        dispatcher = ServerDispatcher()
        dispatcher.register("gdrive", drive_client)
        dispatcher.register("gmail", gmail_client)

        results = await dispatcher.refresh_all()   # {id: catalog | exception}
        result = await dispatcher.execute("gmail", "list_messages", {})
    """

    def __init__(self) -> None:
        self._clients: dict[str, MCPClient] = {}

    def register(self, server_id: str, client: MCPClient) -> None:
        """Add (or replace) the client for *server_id*."""
        self._clients[server_id] = client

    def __contains__(self, server_id: object) -> bool:
        return server_id in self._clients

    @property
    def server_ids(self) -> list[str]:
        return list(self._clients)

    def client(self, server_id: str) -> MCPClient:
        try:
            return self._clients[server_id]
        except KeyError:
            msg = f"Unknown server: {server_id}"
            raise KeyError(msg) from None

    def catalog(self, server_id: str) -> ToolCatalog:
        return self.client(server_id).catalog

    async def execute(
        self,
        server_id: str,
        tool_name: str,
        arguments: dict[str, Any] | None = None,
    ) -> ToolCallResult:
        """Route a single tool call to the server's client."""
        return await self.client(server_id).execute_tool(tool_name, arguments)

    async def refresh_all(self) -> dict[str, ToolCatalog | BaseException]:
        """Re-discover every server concurrently.

        One server failing does not affect the others; its entry holds the
        exception instead of a catalog.
        """
        ids = list(self._clients)
        outcomes = await asyncio.gather(
            *(self._clients[sid].refresh_catalog() for sid in ids),
            return_exceptions=True,
        )
        for sid, outcome in zip(ids, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.warning("discovery failed for %s: %s", sid, outcome)
        return dict(zip(ids, outcomes, strict=True))

    async def close_all(self) -> None:
        await asyncio.gather(*(client.close() for client in self._clients.values()))
