"""ToolMatcher: map a free-text utterance onto one catalog tool.

Two rules, tried per tool in catalog order; the first tool that satisfies
either one wins and no other tool is examined:

1. **prefix**: the utterance equals the tool name (``search files`` or
   ``search_files``) or starts with it followed by a space.  Trailing text
   is assigned to one string argument (see :func:`extract_argument`).
2. **overlap**: at least 70% of the name's words occur in the utterance.
   Only intent is inferred; no argument is filled and every required
   argument is reported missing.

Both rules run for tool *i* before tool *i+1* is considered, so an earlier
overlap match beats a later prefix match.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from toolchat.core.matching.extractor import extract_argument
from toolchat.core.matching.models import MatchResult
from toolchat.protocols.mcp.models import ToolDescriptor

OVERLAP_THRESHOLD = 0.7


def resolve(utterance: str, catalog: Iterable[ToolDescriptor]) -> MatchResult:
    """Resolve *utterance* against *catalog*.  Pure and total."""
    original = utterance.strip()
    normalized = original.lower()
    input_words = normalized.split(" ")

    for tool in catalog:
        spaced = tool.name.replace("_", " ").lower()
        flat = tool.name.lower()

        prefix = _prefix_match(normalized, spaced, flat)
        if prefix is not None:
            rest = original[len(prefix):].strip() if prefix else ""
            args = extract_argument(rest, tool.input_schema)
            missing = [name for name in tool.input_schema.required if name not in args]
            return MatchResult(tool=tool, args=args, missing_required=missing, rule="prefix")

        if _overlaps(spaced.split(" "), input_words):
            return MatchResult(
                tool=tool,
                args={},
                missing_required=list(tool.input_schema.required),
                rule="overlap",
            )

    return MatchResult()


def _prefix_match(normalized: str, spaced: str, flat: str) -> str | None:
    """Return the matched name prefix, ``""`` for exact equality, or ``None``.

    Exact equality never yields trailing text, so no argument is extracted
    even when the tool has a single required string field.
    """
    if normalized.startswith(spaced + " "):
        return spaced
    if normalized.startswith(flat + " "):
        return flat
    if normalized in (spaced, flat):
        return ""
    return None


def _overlaps(tool_words: list[str], input_words: list[str]) -> bool:
    matched = sum(1 for word in tool_words if word in input_words)
    return matched >= math.ceil(len(tool_words) * OVERLAP_THRESHOLD)
