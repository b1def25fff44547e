"""RpcTransport: JSON-RPC over a single HTTP POST per call.

Every call is one request/response exchange: no retries, no backoff and no
persistent session.  Those belong to whatever resilience layer wraps the
transport.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx
from pydantic import ValidationError

from toolchat import __version__
from toolchat.protocols.errors import MalformedResponseError, RpcError, TransportError
from toolchat.protocols.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallResult,
    ToolDescriptor,
)
from toolchat.utils.telemetry import (
    ATTR_HTTP_STATUS,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    ATTR_SERVER_URL,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"


class RequestIdCounter:
    """Strictly increasing request ids, starting at 1.

    Owned by a single transport.  ``next()`` never returns the same value
    twice, including across threads.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    @property
    def peek(self) -> int:
        """The id the next request will receive."""
        return self._next


class RpcTransport:
    """Sends MCP JSON-RPC requests to one server over HTTP.

    Usage::

        async with RpcTransport("http://localhost:8080", token="...") as rpc:
            tools = await rpc.discover_tools()
            result = await rpc.invoke("list_files", {})

    An ``httpx.AsyncClient`` may be injected; the transport then uses it as
    is and leaves closing it to the caller.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        origin: str | None = None,
        path: str = "/",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._path = path if path.startswith("/") else f"/{path}"
        self._token = token
        self._origin = origin
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._ids = RequestIdCounter()

    async def __aenter__(self) -> RpcTransport:
        self._http()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._path}"

    @property
    def ids(self) -> RequestIdCounter:
        return self._ids

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        credential = token if token is not None else self._token
        if credential:
            headers["Authorization"] = f"Bearer {credential}"
        if self._origin:
            headers["Origin"] = self._origin
        return headers

    async def call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        *,
        token: str | None = None,
    ) -> Any:
        """Send one JSON-RPC request and return its ``result``.

        Raises:
            TransportError: non-2xx status, or no response at all.
            MalformedResponseError: body is not a valid response envelope.
            RpcError: the envelope carries an ``error`` object.
        """
        request = JsonRpcRequest(method=method, id=self._ids.next(), params=params)

        with _tracer.start_as_current_span("rpc.call") as span:
            span.set_attribute(ATTR_RPC_METHOD, method)
            span.set_attribute(ATTR_RPC_ID, request.id)
            span.set_attribute(ATTR_SERVER_URL, self.url)

            logger.debug("rpc -> %s id=%d url=%s", method, request.id, self.url)
            try:
                response = await self._http().post(
                    self.url,
                    json=request.to_wire(),
                    headers=self._headers(token),
                )
            except httpx.HTTPError as exc:
                logger.warning("rpc %s id=%d failed before a response: %s", method, request.id, exc)
                raise TransportError(None, str(exc)) from exc

            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)
            if not response.is_success:
                logger.warning("rpc %s id=%d returned HTTP %d", method, request.id, response.status_code)
                raise TransportError(response.status_code, response.text)

            envelope = self._parse_envelope(response)

        if envelope.error is not None:
            message = envelope.error.message or "Unknown RPC error"
            logger.warning("rpc %s id=%d error: %s", method, request.id, message)
            raise RpcError(message, code=envelope.error.code, data=envelope.error.data)

        return envelope.result

    @staticmethod
    def _parse_envelope(response: httpx.Response) -> JsonRpcResponse:
        try:
            raw = response.json()
        except ValueError as exc:
            raise MalformedResponseError("body is not JSON") from exc
        if not isinstance(raw, dict):
            raise MalformedResponseError("envelope is not an object")
        try:
            return JsonRpcResponse.model_validate(raw)
        except ValidationError as exc:
            raise MalformedResponseError(str(exc)) from exc

    # ------------------------------------------------------------------
    # MCP conveniences
    # ------------------------------------------------------------------

    async def initialize(self, *, token: str | None = None) -> Any:
        """Perform the MCP ``initialize`` handshake."""
        return await self.call(
            "initialize",
            params={
                "protocolVersion": MCP_PROTOCOL_VERSION,
                "capabilities": {},
                "clientInfo": {"name": "toolchat", "version": __version__},
            },
            token=token,
        )

    async def discover_tools(self, *, token: str | None = None) -> list[ToolDescriptor]:
        """Send ``tools/list`` and parse the advertised descriptors."""
        result = await self.call("tools/list", token=token)
        raw_tools = result.get("tools") if isinstance(result, dict) else None
        if raw_tools is None:
            return []
        if not isinstance(raw_tools, list):
            raise MalformedResponseError("'tools' is not a list")
        try:
            return [ToolDescriptor.model_validate(raw) for raw in raw_tools]
        except ValidationError as exc:
            raise MalformedResponseError(str(exc)) from exc

    async def invoke(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
        *,
        token: str | None = None,
    ) -> ToolCallResult:
        """Send ``tools/call`` for *name*; arguments are passed through unchecked."""
        result = await self.call(
            "tools/call",
            params={"name": name, "arguments": arguments or {}},
            token=token,
        )
        if not isinstance(result, dict):
            raise MalformedResponseError("tools/call result is not an object")
        try:
            return ToolCallResult.model_validate(result)
        except ValidationError as exc:
            raise MalformedResponseError(str(exc)) from exc
