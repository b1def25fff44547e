"""Resolution record produced by the matcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from toolchat.protocols.mcp.models import ToolDescriptor

MatchRule = Literal["prefix", "overlap"]


@dataclass
class MatchResult:
    """Outcome of resolving one utterance against a catalog.

    "No tool" and "missing required arguments" are ordinary results, not
    errors; callers branch on :attr:`tool` and :attr:`missing_required`.
    """

    tool: ToolDescriptor | None = None
    args: dict[str, Any] = field(default_factory=dict)
    missing_required: list[str] = field(default_factory=list)
    rule: MatchRule | None = None

    @property
    def matched(self) -> bool:
        return self.tool is not None

    @property
    def ready(self) -> bool:
        """True when the tool can be invoked without prompting."""
        return self.tool is not None and not self.missing_required
