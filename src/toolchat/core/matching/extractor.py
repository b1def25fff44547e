"""Assign trailing free text to a tool argument using its input schema."""

from __future__ import annotations

from typing import Any

from toolchat.protocols.mcp.models import ToolInputSchema


def extract_argument(rest: str, schema: ToolInputSchema) -> dict[str, Any]:
    """Return ``{property: rest}`` for the best string slot, or ``{}``.

    Slot choice, in property declaration order:

    1. the first property that is both required and string-typed;
    2. otherwise the first string-typed property, required or not.

    With no string property at all the text is dropped.  Only one slot is
    ever filled.
    """
    if not rest or not schema.properties:
        return {}

    string_props = schema.string_properties()
    required = set(schema.required)

    for name in string_props:
        if name in required:
            return {name: rest}
    if string_props:
        return {string_props[0]: rest}
    return {}
