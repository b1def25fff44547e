"""Markdown cards for mail-server payloads (messages, threads, labels...)."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from toolchat.core.rendering.formatting import (
    format_email_date,
    format_email_sender,
    format_size,
    strip_html_tags,
    truncate,
)

MAX_LISTED_MESSAGES = 25
MAX_LISTED_THREADS = 20
MAX_BODY_CHARS = 2000
GMAIL_MESSAGE_URL = "https://mail.google.com/mail/u/0/#inbox/{id}"

_WHITESPACE_RE = re.compile(r"\s+")


def _message_id_block(data: dict[str, Any]) -> str:
    block = f"Message ID: `{data.get('id')}`"
    if data.get("threadId"):
        block += f"\nThread ID: `{data['threadId']}`"
    return block


# action -> (headline, body builder)
_ACTION_MESSAGES: dict[str, tuple[str, Callable[[dict[str, Any]], str]]] = {
    "send_message": ("Email sent successfully!", _message_id_block),
    "reply_to_message": ("Reply sent successfully!", _message_id_block),
    "forward_message": ("Message forwarded successfully!", _message_id_block),
    "send_draft": ("Draft sent!", _message_id_block),
    "trash_message": ("Message moved to trash.", lambda d: f"Message ID: `{d.get('messageId')}`"),
    "untrash_message": (
        "Message restored from trash.",
        lambda d: f"Message ID: `{d.get('messageId')}`",
    ),
    "delete_message": (
        "Message permanently deleted.",
        lambda d: f"Message ID: `{d.get('messageId')}`",
    ),
    "mark_as_read": ("Message marked as read.", lambda d: f"Message ID: `{d.get('messageId')}`"),
    "mark_as_unread": (
        "Message marked as unread.",
        lambda d: f"Message ID: `{d.get('messageId')}`",
    ),
    "star_message": ("Message starred.", lambda d: f"Message ID: `{d.get('messageId')}`"),
    "unstar_message": (
        "Star removed from message.",
        lambda d: f"Message ID: `{d.get('messageId')}`",
    ),
    "archive_message": ("Message archived.", lambda d: f"Message ID: `{d.get('messageId')}`"),
    "modify_labels": ("Labels updated.", lambda d: f"Message ID: `{d.get('messageId')}`"),
    "trash_thread": ("Thread moved to trash.", lambda d: f"Thread ID: `{d.get('threadId')}`"),
    "delete_thread": (
        "Thread permanently deleted.",
        lambda d: f"Thread ID: `{d.get('threadId')}`",
    ),
    "create_label": ("Label created!", lambda d: f"Name: {d.get('name')}\nID: `{d.get('id')}`"),
    "update_label": ("Label updated!", lambda d: f"Name: {d.get('name')}\nID: `{d.get('id')}`"),
    "delete_label": ("Label deleted.", lambda d: f"Label ID: `{d.get('labelId')}`"),
    "create_draft": ("Draft created!", lambda d: f"Draft ID: `{d.get('draftId')}`"),
    "delete_draft": ("Draft deleted.", lambda d: f"Draft ID: `{d.get('draftId')}`"),
    "get_attachment": ("Attachment retrieved.", lambda d: f"Size: {format_size(d.get('size') or 0)}"),
}


def format_action_response(data: dict[str, Any]) -> str:
    """``{"success": true, "action": ...}`` -> one-line confirmation."""
    entry = _ACTION_MESSAGES.get(str(data.get("action")))
    if entry is None:
        return "**Operation completed successfully.**"
    headline, body = entry
    return f"**{headline}**\n\n{body(data)}"


def _count(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return "N/A"


def format_profile(data: dict[str, Any]) -> str:
    output = (
        "**Gmail Profile**\n\n"
        f"**Email:** {data['emailAddress']}\n"
        f"**Total Messages:** {_count(data.get('messagesTotal'))}\n"
        f"**Total Threads:** {_count(data.get('threadsTotal'))}\n"
    )
    if data.get("historyId"):
        output += f"**History ID:** `{data['historyId']}`"
    return output


def format_labels(labels: list[Any]) -> str:
    if not labels:
        return "No labels found."

    entries = [label for label in labels if isinstance(label, dict)]
    system = [label for label in entries if label.get("type") == "system"]
    custom = [label for label in entries if label.get("type") != "system"]

    output = "**Gmail Labels**\n\n"
    if system:
        output += "**System Labels:**\n"
        output += "".join(f"- {lb.get('name')} (`{lb.get('id')}`)\n" for lb in system)
    if custom:
        output += "\n**Custom Labels:**\n"
        output += "".join(f"- {lb.get('name')} (`{lb.get('id')}`)\n" for lb in custom)
    return output


def format_threads(threads: list[Any]) -> str:
    if not threads:
        return "No threads found."

    output = f"**{len(threads)} thread(s)**\n\n"
    for index, entry in enumerate(threads[:MAX_LISTED_THREADS], start=1):
        thread = entry if isinstance(entry, dict) else {}
        output += f"{index}. **Thread** `{thread.get('id')}`\n"
        if thread.get("snippet"):
            output += f"   {truncate(str(thread['snippet']), 100)}\n"
        output += "\n"
    return output


def format_thread_detail(data: dict[str, Any], now: datetime | None = None) -> str:
    messages = data["messages"] if isinstance(data["messages"], list) else []
    output = f"**Thread** `{data.get('threadId')}` - {len(messages)} message(s)\n\n"
    for index, entry in enumerate(messages, start=1):
        msg = entry if isinstance(entry, dict) else {}
        output += "---\n\n"
        output += f"**Message {index}:** {msg.get('subject') or '(No subject)'}\n"
        output += f"**From:** {format_email_sender(str(msg.get('from') or ''))}\n"
        if msg.get("date"):
            output += f"**Date:** {format_email_date(str(msg['date']), now)}\n"
        output += "\n"
        if msg.get("snippet"):
            output += f"{truncate(str(msg['snippet']), 200)}\n"
        if msg.get("id"):
            output += f"\nID: `{msg['id']}`\n"
        output += "\n"
    return output


def format_drafts(drafts: list[Any]) -> str:
    if not drafts:
        return "No drafts found."

    output = f"**{len(drafts)} draft(s)**\n\n"
    for index, entry in enumerate(drafts, start=1):
        draft = entry if isinstance(entry, dict) else {}
        output += f"{index}. Draft ID: `{draft.get('id')}`\n"
    return output


def format_messages(messages: list[dict[str, Any]], now: datetime | None = None) -> str:
    """Inbox-style listing of at most 25 messages."""
    if not messages:
        return "No emails found."

    plural = "" if len(messages) == 1 else "s"
    output = f"**Inbox** - {len(messages)} message{plural}\n\n"

    for index, entry in enumerate(messages[:MAX_LISTED_MESSAGES], start=1):
        msg = entry if isinstance(entry, dict) else {}
        labels = msg.get("labels") or []
        badges = [
            badge
            for label, badge in (("UNREAD", "new"), ("STARRED", "starred"))
            if label in labels
        ]
        badge_str = f"  `{'  '.join(badges)}`" if badges else ""
        preview = _WHITESPACE_RE.sub(" ", str(msg.get("snippet") or "")).strip()
        date = msg.get("date")

        output += "---\n\n"
        output += f"**{index}. {msg.get('subject') or '(No subject)'}**{badge_str}\n\n"
        output += f"> **From:** {format_email_sender(str(msg.get('from') or 'Unknown sender'))}  \n"
        output += f"> **Date:** {format_email_date(str(date), now) if date else 'Unknown'}\n\n"
        if preview:
            output += f"{preview}\n\n"
        if msg.get("id"):
            output += f"[Open in Gmail]({GMAIL_MESSAGE_URL.format(id=msg['id'])})\n\n"

    if len(messages) > MAX_LISTED_MESSAGES:
        output += f"---\n\n*...and {len(messages) - MAX_LISTED_MESSAGES} more messages.*\n"
    return output


def format_single_message(msg: dict[str, Any], now: datetime | None = None) -> str:
    output = f"**{msg.get('subject') or '(No subject)'}**\n\n"
    output += f"**From:** {format_email_sender(str(msg.get('from') or 'Unknown'))}\n"
    output += f"**To:** {msg.get('to') or 'Unknown'}\n"
    if msg.get("cc"):
        output += f"**CC:** {msg['cc']}\n"
    if msg.get("date"):
        output += f"**Date:** {format_email_date(str(msg['date']), now)}\n"
    attachments = msg.get("attachments")
    if isinstance(attachments, list) and attachments:
        names = ", ".join(str(a.get("filename")) for a in attachments if isinstance(a, dict))
        output += f"**Attachments:** {names}\n"
    output += "\n---\n\n"

    body = str(msg.get("body") or msg.get("snippet") or "")
    if msg.get("isHtml"):
        body = strip_html_tags(body)
    if len(body) > MAX_BODY_CHARS:
        body = body[:MAX_BODY_CHARS] + "\n\n*... (message truncated)*"
    output += body

    if msg.get("id"):
        output += f"\n\n---\n\n[Open in Gmail]({GMAIL_MESSAGE_URL.format(id=msg['id'])})"
    return output
