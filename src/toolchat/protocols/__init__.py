"""Protocol layer: MCP over HTTP JSON-RPC."""

from toolchat.protocols.errors import (
    MalformedResponseError,
    ProtocolError,
    RpcError,
    ToolExecutionError,
    ToolNotFoundError,
    TransportError,
)

__all__ = [
    "MalformedResponseError",
    "ProtocolError",
    "RpcError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "TransportError",
]
