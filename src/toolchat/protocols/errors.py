"""Shared error types for the protocol layer."""

from __future__ import annotations

from typing import Any


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class TransportError(ProtocolError):
    """The HTTP exchange failed or returned a non-success status.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, status_code: int | None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        prefix = f"HTTP {status_code}" if status_code is not None else "HTTP request failed"
        super().__init__(f"{prefix}: {body}" if body else prefix)


class RpcError(ProtocolError):
    """The server answered with a JSON-RPC ``error`` object.

    The server-supplied message is kept verbatim so callers can look for
    authentication-related wording and trigger a reconnect.
    """

    def __init__(self, message: str, code: int | str | None = None, data: Any = None) -> None:
        self.message = message
        self.code = code
        self.data = data
        super().__init__(message)


class MalformedResponseError(ProtocolError):
    """The response body is not a valid JSON-RPC envelope."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Malformed JSON-RPC response" + (f": {detail}" if detail else ""))


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the server's catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolExecutionError(ProtocolError):
    """A tool invocation reported ``isError`` at the server side."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(detail or f"Tool execution failed: {name}")
