"""toolchat: deterministic command resolution for MCP tool servers."""

from __future__ import annotations

__version__ = "0.1.0"
