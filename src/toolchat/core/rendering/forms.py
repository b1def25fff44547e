"""Markdown cards for form-builder payloads."""

from __future__ import annotations

from typing import Any

# Each group is matched when all of its substrings occur in the text; the
# server already formatted such replies for humans.
PREFORMATTED_MARKERS: tuple[tuple[str, ...], ...] = (
    ("Form created successfully",),
    ("Found", "forms:"),
    ("Form Details:",),
    ("Form has", "questions:"),
)


def is_preformatted(text: str) -> bool:
    return any(all(marker in text for marker in group) for group in PREFORMATTED_MARKERS)


def format_forms_listing(forms: list[Any]) -> str:
    """``{"forms": [...]}`` -> numbered list with ids and responder links."""
    if not forms:
        return "No forms found."

    lines = [f"Found **{len(forms)}** form(s):", ""]
    for index, entry in enumerate(forms, start=1):
        form = entry if isinstance(entry, dict) else {}
        title = form.get("title") or form.get("name") or "Untitled"
        lines.append(f"{index}. **{title}**")
        if form.get("formId"):
            lines.append(f"   ID: `{form['formId']}`")
        if form.get("responderUri"):
            lines.append(f"   [Open Form]({form['responderUri']})")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_form_created(data: dict[str, Any]) -> str:
    return (
        "**Form created successfully!**\n\n"
        f"**Title:** {data.get('title') or 'Untitled'}\n"
        f"**Form ID:** `{data['formId']}`\n\n"
        f"[Open Form]({data['responderUri']})"
    )
