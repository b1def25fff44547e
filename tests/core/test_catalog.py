"""Tests for ToolCatalog."""

from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.mcp.models import ToolDescriptor


def _catalog(*names: str) -> ToolCatalog:
    return ToolCatalog(ToolDescriptor(name=n) for n in names)


class TestToolCatalog:
    def test_keeps_discovery_order(self) -> None:
        catalog = _catalog("search_files", "list_files", "get_file")
        assert catalog.names == ("search_files", "list_files", "get_file")
        assert [t.name for t in catalog] == list(catalog.names)
        assert catalog[1].name == "list_files"

    def test_empty(self) -> None:
        catalog = ToolCatalog()
        assert not catalog
        assert len(catalog) == 0
        assert catalog.get("x") is None

    def test_lookup_by_name(self) -> None:
        catalog = _catalog("list_files", "get_file")
        assert "get_file" in catalog
        assert "delete_file" not in catalog
        assert catalog.get("get_file").name == "get_file"

    def test_duplicate_names_first_wins(self) -> None:
        first = ToolDescriptor(name="ping", description="first")
        second = ToolDescriptor(name="ping", description="second")
        catalog = ToolCatalog([first, second])
        assert len(catalog) == 2
        assert catalog.get("ping") is first

    def test_repr(self) -> None:
        assert repr(_catalog("a", "b")) == "ToolCatalog(['a', 'b'])"
