"""ToolCatalog: the ordered, read-only set of tools one server advertises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from toolchat.protocols.mcp.models import ToolDescriptor


class ToolCatalog:
    """Immutable sequence of :class:`ToolDescriptor` in discovery order.

    Order is significant: the matcher picks the first acceptable tool.  A
    catalog is never edited in place; re-discovery produces a new one.
    """

    __slots__ = ("_by_name", "_tools")

    def __init__(self, tools: Iterable[ToolDescriptor] = ()) -> None:
        self._tools: tuple[ToolDescriptor, ...] = tuple(tools)
        self._by_name: dict[str, ToolDescriptor] = {}
        for tool in self._tools:
            self._by_name.setdefault(tool.name, tool)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __bool__(self) -> bool:
        return bool(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, index: int) -> ToolDescriptor:
        return self._tools[index]

    def __repr__(self) -> str:
        return f"ToolCatalog({list(self.names)!r})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(t.name for t in self._tools)

    def get(self, name: str) -> ToolDescriptor | None:
        """Look up a tool by exact name."""
        return self._by_name.get(name)
