"""Tests for ``toolchat tools`` CLI commands."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from toolchat.cli import main
from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.errors import TransportError
from toolchat.protocols.mcp.models import ToolDescriptor

CATALOG = ToolCatalog(
    [
        ToolDescriptor(name="list_files", description="List files"),
        ToolDescriptor.model_validate(
            {
                "name": "search_files",
                "inputSchema": {"properties": {"query": {"type": "string"}}, "required": ["query"]},
            }
        ),
    ]
)


def _configure(mock_client_cls: MagicMock, catalog: ToolCatalog = CATALOG) -> MagicMock:
    instance = mock_client_cls.from_url.return_value
    instance.__aenter__ = AsyncMock(return_value=instance)
    instance.__aexit__ = AsyncMock(return_value=False)
    instance.refresh_catalog = AsyncMock(return_value=catalog)
    return instance


class TestToolsDiscover:
    def test_discover_tools(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            _configure(mock_client_cls)

            runner = CliRunner()
            result = runner.invoke(main, ["tools", "discover", "http://localhost:8080"])

            assert result.exit_code == 0
            assert "list_files" in result.output
            assert "search_files" in result.output

    def test_token_and_origin_are_passed(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            _configure(mock_client_cls)

            runner = CliRunner()
            result = runner.invoke(
                main,
                ["tools", "discover", "http://localhost:8080", "--origin", "http://app"],
                env={"TOOLCHAT_TOKEN": "tok"},
            )

            assert result.exit_code == 0
            mock_client_cls.from_url.assert_called_once_with(
                "http://localhost:8080", token="tok", origin="http://app"
            )

    def test_discover_no_tools(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            _configure(mock_client_cls, ToolCatalog())

            runner = CliRunner()
            result = runner.invoke(main, ["tools", "discover", "http://localhost:8080"])

            assert result.exit_code == 0
            assert "No tools discovered" in result.output

    def test_discover_error(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            instance = _configure(mock_client_cls)
            instance.refresh_catalog = AsyncMock(side_effect=TransportError(401, "Unauthorized"))

            runner = CliRunner()
            result = runner.invoke(main, ["tools", "discover", "http://localhost:8080"])

            assert result.exit_code == 1
            assert "Discovery error" in result.output


class TestToolsMatch:
    def test_match_with_argument(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            _configure(mock_client_cls)

            runner = CliRunner()
            result = runner.invoke(
                main, ["tools", "match", "http://localhost:8080", "search files budget"]
            )

            assert result.exit_code == 0
            assert "search_files" in result.output
            assert "prefix" in result.output
            assert '"query": "budget"' in result.output

    def test_no_match(self) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            _configure(mock_client_cls)

            runner = CliRunner()
            result = runner.invoke(main, ["tools", "match", "http://localhost:8080", "weather"])

            assert result.exit_code == 0
            assert "No matching tool" in result.output
