"""Heuristic intent parser for the file-storage server."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel

from toolchat.core.intents.rules import (
    HELP_PREDICATE,
    IntentParser,
    IntentRule,
    any_of,
    contains_any,
    equals_any,
    first_group,
    starts_with_any,
)


class DriveAction(str, Enum):
    LIST = "list"
    SEARCH = "search"
    HELP = "help"
    UNKNOWN = "unknown"


class DriveIntent(BaseModel):
    action: DriveAction
    query: str | None = None


_SEARCH_QUERY_RE = re.compile(r"(?:search|find|look for)\s*(?:for)?\s*(.+)", re.IGNORECASE)


def _search(lower: str, _original: str) -> DriveIntent:
    # The query comes from the lowercased text.
    return DriveIntent(action=DriveAction.SEARCH, query=first_group(_SEARCH_QUERY_RE, lower))


DRIVE_RULES: list[IntentRule[DriveIntent]] = [
    # Form-related requests belong to the forms server.
    IntentRule(
        "forms_guard",
        contains_any("forms", "form", "survey", "questionnaire"),
        lambda _l, _o: DriveIntent(action=DriveAction.UNKNOWN),
    ),
    IntentRule(
        "list",
        any_of(
            contains_any("list", "show", "files", "what files", "my files", "my documents"),
            equals_any("ls"),
        ),
        lambda _l, _o: DriveIntent(action=DriveAction.LIST),
    ),
    IntentRule(
        "search",
        any_of(starts_with_any("search", "find", "look for"), contains_any("search for")),
        _search,
    ),
    IntentRule("help", HELP_PREDICATE, lambda _l, _o: DriveIntent(action=DriveAction.HELP)),
]

drive_parser: IntentParser[DriveIntent] = IntentParser(
    DRIVE_RULES, lambda: DriveIntent(action=DriveAction.UNKNOWN)
)


def parse_drive_intent(message: str) -> DriveIntent:
    return drive_parser.parse(message)


DRIVE_HELP_MESSAGE = """Here's what I can help you with:

**Available Commands:**
- **"list files"** or **"show my files"** - List files in your Google Drive
- **"search [query]"** - Search for files by name
- **"find [query]"** - Same as search
- **"help"** - Show this help message

**Examples:**
- "Show my files"
- "Search for project report"
- "Find budget spreadsheet"

Try asking me to list your files!"""
