"""MCP protocol: JSON-RPC models and the HTTP transport.

:class:`~toolchat.protocols.mcp.client.MCPClient` lives in its own module
because it depends on :mod:`toolchat.core.catalog`.
"""

from toolchat.protocols.mcp.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallResult,
    ToolContent,
    ToolDescriptor,
    ToolInputSchema,
    ToolProperty,
)
from toolchat.protocols.mcp.transport import MCP_PROTOCOL_VERSION, RequestIdCounter, RpcTransport

__all__ = [
    "MCP_PROTOCOL_VERSION",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "RequestIdCounter",
    "RpcTransport",
    "ToolCallResult",
    "ToolContent",
    "ToolDescriptor",
    "ToolInputSchema",
    "ToolProperty",
]
