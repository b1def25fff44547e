"""Turn raw tool output into user-facing markdown.

Dispatch, first match wins:

1. Text the server already formatted for humans -> only link-ify URLs.
2. Valid JSON -> the first shape in :data:`SHAPES` whose predicate holds,
   else a pretty-printed ``json`` code block.
3. Anything else -> plain text with link-ified URLs.

:func:`render` is total: it never raises and never mutates its input.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from toolchat.core.rendering import drive, forms, gmail
from toolchat.core.rendering.links import linkify

logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = "Operation completed successfully."


@dataclass(frozen=True)
class Shape:
    """A recognisable JSON payload shape and its formatter."""

    name: str
    matches: Callable[[Any], bool]
    format: Callable[[Any, datetime | None], str]


def _is_obj(data: Any) -> bool:
    return isinstance(data, dict)


def _action_is(data: Any, action: str, key: str) -> bool:
    return _is_obj(data) and data.get("action") == action and bool(data.get(key))


SHAPES: tuple[Shape, ...] = (
    # Mail payloads are disjoint from the storage ones and are checked first.
    Shape(
        "gmail_action",
        lambda d: _is_obj(d) and bool(d.get("success")) and bool(d.get("action")),
        lambda d, _now: gmail.format_action_response(d),
    ),
    Shape(
        "gmail_profile",
        lambda d: _action_is(d, "get_profile", "emailAddress"),
        lambda d, _now: gmail.format_profile(d),
    ),
    Shape(
        "gmail_labels",
        lambda d: _action_is(d, "list_labels", "labels"),
        lambda d, _now: gmail.format_labels(d["labels"]),
    ),
    Shape(
        "gmail_threads",
        lambda d: _action_is(d, "list_threads", "threads"),
        lambda d, _now: gmail.format_threads(d["threads"]),
    ),
    Shape(
        "gmail_thread",
        lambda d: _action_is(d, "get_thread", "messages"),
        gmail.format_thread_detail,
    ),
    Shape(
        "gmail_drafts",
        lambda d: _action_is(d, "list_drafts", "drafts"),
        lambda d, _now: gmail.format_drafts(d["drafts"]),
    ),
    Shape(
        "gmail_messages",
        lambda d: isinstance(d, list) and bool(d) and _is_obj(d[0]) and "from" in d[0],
        gmail.format_messages,
    ),
    Shape(
        "gmail_message",
        lambda d: _is_obj(d) and all(key in d for key in ("from", "subject", "body")),
        gmail.format_single_message,
    ),
    # Storage and form payloads.
    Shape(
        "file_listing",
        lambda d: _is_obj(d) and isinstance(d.get("files"), list),
        lambda d, _now: drive.format_file_listing(d["files"]),
    ),
    Shape(
        "form_listing",
        lambda d: _is_obj(d) and isinstance(d.get("forms"), list),
        lambda d, _now: forms.format_forms_listing(d["forms"]),
    ),
    Shape(
        "item_details",
        lambda d: _is_obj(d) and bool(d.get("id")) and bool(d.get("name")),
        lambda d, _now: drive.format_file_details(d),
    ),
    Shape(
        "form_created",
        lambda d: _is_obj(d) and bool(d.get("formId")) and bool(d.get("responderUri")),
        lambda d, _now: forms.format_form_created(d),
    ),
)


def render(raw_text: str, *, now: datetime | None = None) -> str:
    """Render *raw_text* as markdown.

    *now* anchors relative email dates ("Today at ..."); defaults to the
    current time.
    """
    if forms.is_preformatted(raw_text):
        return linkify(raw_text)

    try:
        data = json.loads(raw_text)
    except (ValueError, RecursionError):
        return linkify(raw_text)
    if data is None:
        return linkify(raw_text)

    for shape in SHAPES:
        try:
            if shape.matches(data):
                return shape.format(data, now)
        except Exception:
            # A half-matching payload falls through to the next shape.
            logger.debug("renderer shape %s failed", shape.name, exc_info=True)
    try:
        return format_json_block(data)
    except (ValueError, RecursionError):
        logger.debug("cannot re-serialise payload, rendering as text", exc_info=True)
        return linkify(raw_text)


def format_json_block(data: Any) -> str:
    """Pretty-print *data* inside a fenced ``json`` block."""
    return "```json\n" + json.dumps(data, indent=2, ensure_ascii=False) + "\n```"
