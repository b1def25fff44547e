"""Per-server heuristic intent parsers (rule lists, first match wins)."""

from toolchat.core.intents.drive import (
    DRIVE_HELP_MESSAGE,
    DriveAction,
    DriveIntent,
    parse_drive_intent,
)
from toolchat.core.intents.forms import (
    FORMS_HELP_MESSAGE,
    FormsAction,
    FormsIntent,
    parse_forms_intent,
)
from toolchat.core.intents.gmail import (
    GMAIL_HELP_MESSAGE,
    GmailAction,
    GmailIntent,
    parse_gmail_intent,
)
from toolchat.core.intents.rules import IntentParser, IntentRule

__all__ = [
    "DRIVE_HELP_MESSAGE",
    "FORMS_HELP_MESSAGE",
    "GMAIL_HELP_MESSAGE",
    "DriveAction",
    "DriveIntent",
    "FormsAction",
    "FormsIntent",
    "GmailAction",
    "GmailIntent",
    "IntentParser",
    "IntentRule",
    "parse_drive_intent",
    "parse_forms_intent",
    "parse_gmail_intent",
]
