"""User-facing help, prompt and no-match messages built from a catalog."""

from __future__ import annotations

from collections.abc import Sequence

from toolchat.core.catalog import ToolCatalog
from toolchat.protocols.mcp.models import ToolDescriptor

MAX_EXAMPLES = 3


def readable_name(tool: ToolDescriptor) -> str:
    return tool.name.replace("_", " ")


def tools_help_message(catalog: ToolCatalog, server_name: str) -> str:
    """List every tool with its description, plus a few example commands."""
    if not catalog:
        return f"No tools available for {server_name}."

    lines = [f"Here's what I can help you with in **{server_name}**:", "", "**Available Commands:**"]
    for tool in catalog:
        lines.append(f'- **"{readable_name(tool)}"** - {tool.description or "No description"}')

    lines += ["", "**Examples:**"]
    for tool in list(catalog)[:MAX_EXAMPLES]:
        lines.append(f'- "{readable_name(tool)}"')

    lines += ["", "Try one of the commands above!"]
    return "\n".join(lines)


def missing_arguments_prompt(tool: ToolDescriptor, missing: Sequence[str]) -> str:
    """Ask for the required arguments the utterance did not supply."""
    name = readable_name(tool)
    bullets = "\n".join(f"- **{param}**" for param in missing)
    usage = f"{name} [{missing[0]}]" if missing else name
    return (
        f"**{name}** requires the following argument(s):\n\n{bullets}\n\n**Usage:** `{usage}`"
    )


def no_match_message(utterance: str, catalog: ToolCatalog, server_name: str) -> str:
    return (
        f'I couldn\'t find a matching command for: "{utterance}"\n\n'
        + tools_help_message(catalog, server_name)
    )
