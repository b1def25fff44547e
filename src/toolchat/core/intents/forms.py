"""Heuristic intent parser for the form-builder server."""

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


class FormsAction(str, Enum):
    LIST = "list"
    CREATE = "create"
    GET = "get"
    QUESTIONS = "questions"
    RESPONSES = "responses"
    HELP = "help"
    UNKNOWN = "unknown"


class FormsIntent(BaseModel):
    action: FormsAction
    form_title: str | None = None
    form_id: str | None = None
    description: str | None = None


# "create a form named Feedback" is tried before the bare "create form Feedback".
_NAMED_TITLE_RE = re.compile(
    r"""(?:create|new|make)\s+(?:a\s+)?(?:google\s+)?form\s+(?:name[d]?\s*[-:]?\s*)?['"]?([^'"]+?)['"]?$""",
    re.IGNORECASE,
)
_SIMPLE_TITLE_RE = re.compile(
    r"""(?:create|new|make)\s+(?:a\s+)?(?:google\s+)?form\s+['"]?(.+?)['"]?$""",
    re.IGNORECASE,
)
_GET_ID_RE = re.compile(r"form\s+([a-zA-Z0-9_-]+)", re.IGNORECASE)
_QUESTIONS_ID_RE = re.compile(r"(?:form|questions)\s+([a-zA-Z0-9_-]+)", re.IGNORECASE)
_RESPONSES_ID_RE = re.compile(r"(?:form|responses|submissions)\s+([a-zA-Z0-9_-]+)", re.IGNORECASE)


def _create(_lower: str, message: str) -> FormsIntent:
    title = first_group(_NAMED_TITLE_RE, message) or first_group(_SIMPLE_TITLE_RE, message)
    return FormsIntent(action=FormsAction.CREATE, form_title=title or None)


def _with_id(action: FormsAction, pattern: re.Pattern[str]):  # noqa: ANN202
    def build(_lower: str, message: str) -> FormsIntent:
        return FormsIntent(action=action, form_id=first_group(pattern, message))

    return build


FORMS_RULES: list[IntentRule[FormsIntent]] = [
    IntentRule(
        "list",
        any_of(
            contains_any(
                "list forms",
                "my forms",
                "show forms",
                "list my forms",
                "show my forms",
                "all forms",
            ),
            equals_any("forms"),
        ),
        lambda _l, _o: FormsIntent(action=FormsAction.LIST),
    ),
    IntentRule(
        "create",
        any_of(
            starts_with_any(
                "create form",
                "create a form",
                "new form",
                "make form",
                "create google form",
            ),
            contains_any("create form name", "create google form name"),
        ),
        _create,
    ),
    IntentRule(
        "get",
        any_of(starts_with_any("get form", "show form"), contains_any("form details")),
        _with_id(FormsAction.GET, _GET_ID_RE),
    ),
    IntentRule(
        "questions",
        contains_any("questions", "form questions"),
        _with_id(FormsAction.QUESTIONS, _QUESTIONS_ID_RE),
    ),
    IntentRule(
        "responses",
        contains_any("responses", "form responses", "submissions"),
        _with_id(FormsAction.RESPONSES, _RESPONSES_ID_RE),
    ),
    IntentRule("help", HELP_PREDICATE, lambda _l, _o: FormsIntent(action=FormsAction.HELP)),
]

forms_parser: IntentParser[FormsIntent] = IntentParser(
    FORMS_RULES, lambda: FormsIntent(action=FormsAction.UNKNOWN)
)


def parse_forms_intent(message: str) -> FormsIntent:
    return forms_parser.parse(message)


FORMS_HELP_MESSAGE = """Here's what I can help you with in **Google Forms**:

**Available Commands:**
- **"list my forms"** or **"show forms"** - List all your Google Forms
- **"create form [name]"** - Create a new form
- **"get form [id]"** - Get details of a specific form
- **"form questions [id]"** - View questions in a form
- **"form responses [id]"** - View responses for a form
- **"help"** - Show this help message

**Examples:**
- "List my forms"
- "Create form Customer Survey"
- "Create a form named Feedback Form"
- "Show forms"

Try asking me to list your forms!"""
