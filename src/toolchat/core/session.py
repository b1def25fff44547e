"""CommandSession: one chat turn against one MCP server.

The flow for each message:

1. ``help`` / ``?`` / "what can you do" -> the tool help text.
2. No tools known yet -> discover once; still none -> a "still loading" notice.
3. Resolve the message.  No tool -> the no-match text; missing required
   arguments -> a prompt, nothing is invoked.
4. Otherwise invoke the tool and render its output.

Protocol failures become an ``error`` reply; anything else propagates.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from toolchat.core.help import missing_arguments_prompt, no_match_message, tools_help_message
from toolchat.core.matching import resolve
from toolchat.core.rendering import EMPTY_RESULT_MESSAGE, render
from toolchat.protocols.errors import ProtocolError
from toolchat.utils.telemetry import (
    ATTR_MATCH_RULE,
    ATTR_MISSING_COUNT,
    ATTR_SERVER_NAME,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from opentelemetry.trace import Span

    from toolchat.core.matching import MatchResult
    from toolchat.protocols.mcp.client import MCPClient

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

ERROR_PREFIX = "Failed to process your request. "


class Reply(BaseModel):
    """What the front end shows for one user message."""

    role: Literal["assistant", "error"] = "assistant"
    content: str


def is_help_request(text: str) -> bool:
    lower = text.lower().strip()
    return lower in ("help", "?") or "what can you do" in lower


class CommandSession:
    """Drives the help -> resolve -> prompt-or-invoke -> render cycle.

    *now*, when given, pins the reference time used for relative email
    dates; otherwise each render uses the current time.
    """

    def __init__(
        self,
        client: MCPClient,
        *,
        server_name: str | None = None,
        now: datetime | None = None,
    ) -> None:
        self._client = client
        self._server_name = server_name or client.name
        self._now = now

    @property
    def server_name(self) -> str:
        return self._server_name

    @property
    def loading_message(self) -> str:
        return (
            f"Connecting to {self._server_name}... Tools are still loading. "
            "Please try again in a moment."
        )

    async def handle(self, text: str) -> Reply:
        with _tracer.start_as_current_span("session.handle") as span:
            span.set_attribute(ATTR_SERVER_NAME, self._server_name)
            try:
                content = await self._respond(text, span)
            except ProtocolError as exc:
                logger.warning("request to %s failed: %s", self._server_name, exc)
                detail = str(exc) or "Please try again."
                return Reply(role="error", content=ERROR_PREFIX + detail)
            return Reply(content=content)

    async def _respond(self, text: str, span: Span) -> str:
        catalog = self._client.catalog
        if is_help_request(text):
            return tools_help_message(catalog, self._server_name)

        if not catalog:
            catalog = await self._client.refresh_catalog()
            if not catalog:
                return self.loading_message

        match = resolve(text, catalog)
        if match.tool is None:
            logger.debug("no tool matched %r on %s", text, self._server_name)
            return no_match_message(text, catalog, self._server_name)

        span.set_attribute(ATTR_TOOL_NAME, match.tool.name)
        span.set_attribute(ATTR_MATCH_RULE, match.rule or "")
        span.set_attribute(ATTR_MISSING_COUNT, len(match.missing_required))

        if match.missing_required:
            return missing_arguments_prompt(match.tool, match.missing_required)
        return await self._invoke(match)

    async def _invoke(self, match: MatchResult) -> str:
        assert match.tool is not None
        logger.info("executing %s on %s", match.tool.name, self._server_name)
        result = await self._client.execute_tool(match.tool.name, match.args)
        if not result.content:
            return EMPTY_RESULT_MESSAGE
        return render(result.text, now=self._now)
