"""MCPClient: one server's transport plus its cached tool catalog.

Implements discovery (``tools/list``) and invoke-by-name (``tools/call``)
on top of :class:`RpcTransport`, keeping the most recent catalog so the
matcher can run without a round trip.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.errors import ToolExecutionError, ToolNotFoundError
from toolchat.protocols.mcp.models import ToolCallResult
from toolchat.protocols.mcp.transport import RpcTransport

if TYPE_CHECKING:
    from toolchat.core.config import ServerRef

logger = logging.getLogger(__name__)


class MCPClient:
    """Async context manager bound to one MCP server.

    Usage::

        async with MCPClient.from_url("http://localhost:8080", token=tok) as client:
            catalog = await client.refresh_catalog()
            result = await client.execute_tool("list_files", {})

    With ``handshake=True``, :meth:`connect` sends ``initialize`` first.
    """

    def __init__(
        self,
        transport: RpcTransport,
        *,
        name: str = "",
        handshake: bool = False,
    ) -> None:
        self._transport = transport
        self._name = name or transport.url
        self._handshake = handshake
        self._catalog = ToolCatalog()
        self._server_info: Any = None

    @classmethod
    def from_url(
        cls,
        base_url: str,
        *,
        name: str = "",
        token: str | None = None,
        origin: str | None = None,
        path: str = "/",
        timeout: float = 30.0,
        handshake: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> MCPClient:
        transport = RpcTransport(
            base_url,
            token=token,
            origin=origin,
            path=path,
            timeout=timeout,
            client=http_client,
        )
        return cls(transport, name=name, handshake=handshake)

    @classmethod
    def from_ref(
        cls,
        ref: ServerRef,
        *,
        token: str | None = None,
        handshake: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> MCPClient:
        """Build a client from a configured server; *token* overrides ``ref.token``."""
        return cls.from_url(
            ref.base_url,
            name=ref.name,
            token=token if token is not None else ref.token,
            origin=ref.origin,
            path=ref.path,
            timeout=ref.timeout,
            handshake=handshake,
            http_client=http_client,
        )

    async def __aenter__(self) -> MCPClient:
        await self.connect()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    @property
    def name(self) -> str:
        return self._name

    @property
    def transport(self) -> RpcTransport:
        return self._transport

    @property
    def catalog(self) -> ToolCatalog:
        """The catalog from the last successful discovery (empty before)."""
        return self._catalog

    @property
    def server_info(self) -> Any:
        """The ``initialize`` result, when a handshake was performed."""
        return self._server_info

    async def connect(self) -> None:
        """Perform the ``initialize`` handshake if this client was asked to."""
        if self._handshake:
            self._server_info = await self._transport.initialize()
            logger.debug("initialized %s: %r", self._name, self._server_info)

    async def close(self) -> None:
        await self._transport.close()

    async def refresh_catalog(self) -> ToolCatalog:
        """Re-run discovery and replace the cached catalog wholesale.

        On failure the previous catalog is kept and the error propagates.
        """
        tools = await self._transport.discover_tools()
        self._catalog = ToolCatalog(tools)
        logger.info("discovered %d tool(s) on %s", len(self._catalog), self._name)
        return self._catalog

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolCallResult:
        """Invoke *name* and return the raw result, ``isError`` included."""
        if name not in self._catalog:
            raise ToolNotFoundError(name)
        return await self._transport.invoke(name, arguments)

    async def execute_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolCallResult:
        """Invoke *name*, raising :class:`ToolExecutionError` on ``isError``."""
        result = await self.call_tool(name, arguments)
        if result.is_error:
            logger.warning("tool %s on %s reported an error", name, self._name)
            raise ToolExecutionError(name, result.first_text)
        return result
