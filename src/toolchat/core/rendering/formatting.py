"""Small value formatters shared by the domain renderers."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta
from email.utils import parsedate_to_datetime
from typing import Any

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")

# Ordered: the first matching mimeType substring decides the icon.
_FILE_ICONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("folder",), "📁"),
    (("document", "word"), "📝"),
    (("spreadsheet", "excel"), "📊"),
    (("presentation", "powerpoint"), "📽️"),
    (("image",), "🖼️"),
    (("pdf",), "📕"),
    (("video",), "🎬"),
    (("audio",), "🎵"),
    (("form",), "📋"),
)
DEFAULT_FILE_ICON = "📄"

_SENDER_RE = re.compile(r'^"?([^"<]+)"?\s*<(.+)>$')


def format_size(value: Any) -> str:
    """Human-readable byte count: ``0 -> "0 Bytes"``, ``1536 -> "1.5 KB"``.

    Values that are not numbers come back unchanged as text.
    """
    try:
        num = float(value)
    except (TypeError, ValueError):
        return str(value)
    if num == 0:
        return "0 Bytes"
    if not math.isfinite(num):
        return str(value)

    # floor(log_1024(|num|)), computed exactly and capped at GB
    index = 0
    while index < len(_SIZE_UNITS) - 1 and abs(num) >= 1024 ** (index + 1):
        index += 1
    scaled = f"{num / 1024**index:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_SIZE_UNITS[index]}"


def file_icon(mime_type: str | None) -> str:
    """Pick an emoji for a file from its mimeType."""
    if not mime_type:
        return DEFAULT_FILE_ICON
    for needles, icon in _FILE_ICONS:
        if any(needle in mime_type for needle in needles):
            return icon
    return DEFAULT_FILE_ICON


def _parse_datetime(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


def format_date(value: Any) -> str:
    """Render an ISO timestamp as ``M/D/YYYY``; unparseable input is returned as is."""
    text = str(value)
    parsed = _parse_datetime(text)
    if parsed is None:
        return text
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_email_date(value: str, now: datetime | None = None) -> str:
    """Render a message date relative to *now*.

    ``Today at 09:05 AM``, ``Yesterday at 09:05 AM`` or
    ``Mar 4, 2024 at 09:05 AM``.
    """
    parsed = _parse_datetime(value)
    if parsed is None:
        return value
    if now is None:
        now = datetime.now(tz=parsed.tzinfo)
    elif parsed.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(parsed.tzinfo)

    clock = parsed.strftime("%I:%M %p")
    if parsed.date() == now.date():
        return f"Today at {clock}"
    if parsed.date() == (now - timedelta(days=1)).date():
        return f"Yesterday at {clock}"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year} at {clock}"


def format_email_sender(sender: str) -> str:
    """``"Jane Doe <jane@example.com>"`` becomes ``**Jane Doe** (jane@example.com)``."""
    match = _SENDER_RE.match(sender)
    if match:
        return f"**{match.group(1).strip()}** ({match.group(2)})"
    return sender


_HTML_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"<[^>]+>"), ""),
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
    (re.compile(r"&quot;", re.IGNORECASE), '"'),
    (re.compile(r"&#39;", re.IGNORECASE), "'"),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def strip_html_tags(html: str) -> str:
    """Reduce an HTML email body to readable plain text."""
    text = html
    for pattern, replacement in _HTML_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text.strip()


def truncate(text: str, limit: int, suffix: str = "...") -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + suffix
