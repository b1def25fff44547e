"""Tests for the protocol error taxonomy."""

from toolchat.protocols.errors import (
    MalformedResponseError,
    ProtocolError,
    RpcError,
    ToolExecutionError,
    ToolNotFoundError,
    TransportError,
)


class TestErrorMessages:
    def test_transport_error_with_status(self) -> None:
        err = TransportError(503, "Service Unavailable")
        assert str(err) == "HTTP 503: Service Unavailable"

    def test_transport_error_without_response(self) -> None:
        err = TransportError(None)
        assert err.status_code is None
        assert str(err) == "HTTP request failed"

    def test_rpc_error_keeps_message(self) -> None:
        err = RpcError("Invalid Credentials", code=401)
        assert str(err) == "Invalid Credentials"
        assert err.code == 401

    def test_malformed(self) -> None:
        assert str(MalformedResponseError()) == "Malformed JSON-RPC response"
        assert str(MalformedResponseError("body is not JSON")).endswith(": body is not JSON")

    def test_tool_errors(self) -> None:
        assert str(ToolNotFoundError("x")) == "Tool not found: x"
        assert str(ToolExecutionError("x", "quota")) == "quota"
        assert str(ToolExecutionError("x")) == "Tool execution failed: x"

    def test_hierarchy(self) -> None:
        for cls in (
            TransportError,
            RpcError,
            MalformedResponseError,
            ToolNotFoundError,
            ToolExecutionError,
        ):
            assert issubclass(cls, ProtocolError)
