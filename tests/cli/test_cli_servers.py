"""Tests for ``toolchat servers``."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from toolchat.cli import main
from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.errors import TransportError
from toolchat.protocols.mcp.models import ToolDescriptor

_SERVERS = """\
servers:
  - id: files
    name: Files
    base_url: http://files.test
  - id: mail
    name: Mail
    base_url: http://mail.test
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "servers.yaml"
    path.write_text(_SERVERS)
    return path


class TestServersList:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOOLCHAT_CONFIG", raising=False)
        runner = CliRunner()
        result = runner.invoke(main, ["servers", "list"])

        assert result.exit_code == 0
        for server_id in ("gdrive", "gforms", "gmail"):
            assert server_id in result.output

    def test_config_file(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--config", str(config_file), "servers", "list"])

        assert result.exit_code == 0
        assert "files" in result.output
        assert "gdrive" not in result.output

    def test_config_from_env(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["servers", "list"], env={"TOOLCHAT_CONFIG": str(config_file)})

        assert result.exit_code == 0
        assert "mail" in result.output

    def test_bad_config(self, tmp_path: Path) -> None:
        path = tmp_path / "servers.yaml"
        path.write_text("nothing: here\n")

        runner = CliRunner()
        result = runner.invoke(main, ["--config", str(path), "servers", "list"])

        assert result.exit_code == 1
        assert "Config error" in result.output


class TestServersStatus:
    def test_status_counts_tools(self, config_file: Path) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            instance = mock_client_cls.from_ref.return_value
            instance.refresh_catalog = AsyncMock(
                return_value=ToolCatalog([ToolDescriptor(name="a"), ToolDescriptor(name="b")])
            )
            instance.close = AsyncMock()

            runner = CliRunner()
            result = runner.invoke(main, ["--config", str(config_file), "servers", "status"])

            assert result.exit_code == 0
            assert "ok" in result.output
            assert "2" in result.output
            assert mock_client_cls.from_ref.call_count == 2
            assert instance.close.await_count == 2

    def test_status_reports_errors(self, config_file: Path) -> None:
        with patch("toolchat.protocols.mcp.client.MCPClient") as mock_client_cls:
            instance = mock_client_cls.from_ref.return_value
            instance.refresh_catalog = AsyncMock(side_effect=TransportError(None, "refused"))
            instance.close = AsyncMock()

            runner = CliRunner()
            result = runner.invoke(main, ["--config", str(config_file), "servers", "status"])

            assert result.exit_code == 0
            assert "error" in result.output
            assert "refused" in result.output
