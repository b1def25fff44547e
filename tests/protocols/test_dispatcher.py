"""Tests for ServerDispatcher."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.dispatcher import ServerDispatcher
from toolchat.protocols.errors import TransportError
from toolchat.protocols.mcp.models import ToolCallResult, ToolDescriptor


def _make_client(*names: str) -> MagicMock:
    client = MagicMock()
    catalog = ToolCatalog(ToolDescriptor(name=n) for n in names)
    client.catalog = catalog
    client.refresh_catalog = AsyncMock(return_value=catalog)
    client.execute_tool = AsyncMock(
        return_value=ToolCallResult.model_validate({"content": [{"text": names[0]}]})
    )
    client.close = AsyncMock()
    return client


class TestServerDispatcher:
    def test_register_and_lookup(self) -> None:
        dispatcher = ServerDispatcher()
        drive = _make_client("list_files")
        dispatcher.register("gdrive", drive)

        assert "gdrive" in dispatcher
        assert dispatcher.server_ids == ["gdrive"]
        assert dispatcher.client("gdrive") is drive
        assert dispatcher.catalog("gdrive").names == ("list_files",)

    def test_unknown_server(self) -> None:
        with pytest.raises(KeyError, match="Unknown server: nope"):
            ServerDispatcher().client("nope")

    async def test_execute_routes_to_server(self) -> None:
        dispatcher = ServerDispatcher()
        drive = _make_client("list_files")
        gmail = _make_client("list_messages")
        dispatcher.register("gdrive", drive)
        dispatcher.register("gmail", gmail)

        result = await dispatcher.execute("gmail", "list_messages", {"maxResults": 5})

        assert result.text == "list_messages"
        gmail.execute_tool.assert_awaited_once_with("list_messages", {"maxResults": 5})
        drive.execute_tool.assert_not_awaited()

    async def test_refresh_all_isolates_failures(self) -> None:
        dispatcher = ServerDispatcher()
        drive = _make_client("list_files", "search_files")
        forms = _make_client("list_forms")
        forms.refresh_catalog.side_effect = TransportError(None, "connection refused")
        dispatcher.register("gdrive", drive)
        dispatcher.register("gforms", forms)

        outcomes = await dispatcher.refresh_all()

        assert list(outcomes) == ["gdrive", "gforms"]
        assert isinstance(outcomes["gdrive"], ToolCatalog)
        assert len(outcomes["gdrive"]) == 2
        assert isinstance(outcomes["gforms"], TransportError)

    async def test_close_all(self) -> None:
        dispatcher = ServerDispatcher()
        clients = [_make_client("a"), _make_client("b")]
        for i, client in enumerate(clients):
            dispatcher.register(str(i), client)

        await dispatcher.close_all()

        for client in clients:
            client.close.assert_awaited_once()
