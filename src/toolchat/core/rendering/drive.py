"""Markdown cards for storage-provider file payloads."""

from __future__ import annotations

from typing import Any

from toolchat.core.rendering.formatting import file_icon, format_date, format_size

MAX_LISTED_FILES = 15


def format_file_listing(files: list[Any]) -> str:
    """``{"files": [...]}`` -> numbered list of at most 15 entries."""
    if not files:
        return "No files found."

    lines = [f"Found **{len(files)}** file(s):", ""]
    for index, entry in enumerate(files[:MAX_LISTED_FILES], start=1):
        item = entry if isinstance(entry, dict) else {}
        lines.append(f"{index}. {file_icon(item.get('mimeType'))} **{item.get('name', '')}**")
        if item.get("modifiedTime"):
            lines.append(f"   Modified: {format_date(item['modifiedTime'])}")
        if item.get("webViewLink"):
            lines.append(f"   [Open in Drive]({item['webViewLink']})")
        lines.append("")

    output = "\n".join(lines) + "\n"
    if len(files) > MAX_LISTED_FILES:
        output += f"\n*...and {len(files) - MAX_LISTED_FILES} more files.*"
    return output


def format_file_details(data: dict[str, Any]) -> str:
    """Single item with ``id`` and ``name`` -> detail card."""
    lines = [f"{file_icon(data.get('mimeType'))} **{data['name']}**", ""]
    if data.get("mimeType"):
        lines.append(f"**Type:** {data['mimeType']}")
    if data.get("size"):
        lines.append(f"**Size:** {format_size(data['size'])}")
    if data.get("modifiedTime"):
        lines.append(f"**Modified:** {format_date(data['modifiedTime'])}")
    if data.get("createdTime"):
        lines.append(f"**Created:** {format_date(data['createdTime'])}")

    output = "\n".join(lines) + "\n"
    if data.get("webViewLink"):
        output += f"\n[Open in Drive]({data['webViewLink']})"
    return output
