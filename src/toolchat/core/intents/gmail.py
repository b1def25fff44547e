"""Heuristic intent parser for the mail server.

Besides the action, a ``send`` intent carries best-effort ``to``,
``subject`` and ``body`` fields.  Their checks run in a fixed order: the
quoted-message form (``send 'hi' to ...``) before the explicit ``subject``
and ``body``/``message`` forms, and a bare ``saying ...`` only fills a body
nothing else supplied.
"""

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
    searches_any,
    starts_with_any,
)


class GmailAction(str, Enum):
    INBOX = "inbox"
    SEARCH = "search"
    SEND = "send"
    LABELS = "labels"
    HELP = "help"
    UNKNOWN = "unknown"


class GmailIntent(BaseModel):
    action: GmailAction
    query: str | None = None
    to: str | None = None
    subject: str | None = None
    body: str | None = None


_SEARCH_QUERY_RE = re.compile(
    r"(?:search|find)\s*(?:for)?\s*(?:emails?|mail|messages?)\s*(?:about|for|from|with)?\s*(.+)",
    re.IGNORECASE,
)
_ADDRESS_RE = re.compile(r"(?:to\s+)?([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", re.IGNORECASE)
_QUOTED_MESSAGE_RE = re.compile(r"""send\s+['"](.+?)['"]\s+(?:to|mail)""", re.IGNORECASE)
_SUBJECT_RE = re.compile(
    r"""(?:with\s+)?subject\s*[:\s]+['"]?([^'"]+?)['"]?\s*(?:and|body|$)""", re.IGNORECASE
)
_BODY_RE = re.compile(r"""(?:body|message|saying|content)\s*[:\s]+['"]?(.+?)['"]?$""", re.IGNORECASE)
_SAYING_RE = re.compile(r"""saying\s+['"]?(.+?)['"]?$""", re.IGNORECASE)

SUBJECT_MAX_CHARS = 50


def _search(lower: str, _original: str) -> GmailIntent:
    return GmailIntent(action=GmailAction.SEARCH, query=first_group(_SEARCH_QUERY_RE, lower))


def _send(_lower: str, message: str) -> GmailIntent:
    to = None
    address = _ADDRESS_RE.search(message)
    if address:
        to = address.group(1)

    body: str | None = None
    subject: str | None = None

    quoted = _QUOTED_MESSAGE_RE.search(message)
    if quoted:
        body = quoted.group(1)
        subject = body if len(body) <= SUBJECT_MAX_CHARS else body[: SUBJECT_MAX_CHARS - 3] + "..."

    explicit_subject = first_group(_SUBJECT_RE, message)
    if explicit_subject is not None:
        subject = explicit_subject

    explicit_body = first_group(_BODY_RE, message)
    if explicit_body is not None:
        body = explicit_body

    if not body:
        saying = first_group(_SAYING_RE, message)
        if saying is not None:
            body = saying

    return GmailIntent(action=GmailAction.SEND, to=to, subject=subject, body=body)


GMAIL_RULES: list[IntentRule[GmailIntent]] = [
    IntentRule(
        "inbox",
        any_of(
            contains_any(
                "inbox",
                "my emails",
                "my mail",
                "list emails",
                "list messages",
                "show emails",
                "show messages",
                "show mail",
                "recent emails",
                "recent mail",
                "check mail",
                "check email",
                "last mail",
                "last email",
                "latest mail",
                "latest email",
            ),
            searches_any(r"show.*\d+.*mail", r"show.*\d+.*email", r"get.*mail", r"get.*email"),
            equals_any("emails", "mail"),
        ),
        lambda _l, _o: GmailIntent(action=GmailAction.INBOX),
    ),
    IntentRule(
        "search",
        any_of(
            starts_with_any("search emails", "search mail", "find emails", "find mail"),
            contains_any("search for email", "find email"),
        ),
        _search,
    ),
    IntentRule(
        "labels",
        any_of(contains_any("labels", "categories", "folders"), equals_any("list labels")),
        lambda _l, _o: GmailIntent(action=GmailAction.LABELS),
    ),
    IntentRule(
        "send",
        any_of(
            starts_with_any("send", "compose", "write email", "write an email", "draft"),
            contains_any("email to ", "mail to "),
        ),
        _send,
    ),
    IntentRule("help", HELP_PREDICATE, lambda _l, _o: GmailIntent(action=GmailAction.HELP)),
]

gmail_parser: IntentParser[GmailIntent] = IntentParser(
    GMAIL_RULES, lambda: GmailIntent(action=GmailAction.UNKNOWN)
)


def parse_gmail_intent(message: str) -> GmailIntent:
    return gmail_parser.parse(message)


GMAIL_HELP_MESSAGE = """Here's what I can help you with in **Gmail**:

**Available Commands:**
- **"show my inbox"** or **"check email"** - List recent emails
- **"search emails about [topic]"** - Search your emails
- **"find emails from [sender]"** - Find emails from a specific sender
- **"send 'message' to email@example.com"** - Send an email
- **"labels"** - List your Gmail labels
- **"help"** - Show this help message

**Examples:**
- "Show my inbox"
- "Check my email"
- "Search emails about project update"
- "Find emails from john@example.com"
- "Send 'Hello!' to friend@example.com"
- "Email to boss@work.com saying Meeting confirmed"

Try asking me to show your inbox!"""
