"""Rewrite bare URLs in plain text into labelled markdown links."""

from __future__ import annotations

import re

# Bare http(s) URLs not already sitting inside a markdown link.
URL_RE = re.compile(r"(?<!\]\()(?<!\[)(https?://[^\s)]+)")

# Checked in order; the first group with a matching substring names the link.
LINK_LABELS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("docs.google.com/forms", "forms/d/e/"), "📝 Open Form"),
    (("docs.google.com/document",), "📄 Open Document"),
    (("docs.google.com/spreadsheets",), "📊 Open Spreadsheet"),
    (("drive.google.com",), "📂 Open in Drive"),
)
DEFAULT_LINK_LABEL = "Open Link"


def link_label(url: str) -> str:
    """Label for *url*, first matching group in :data:`LINK_LABELS` wins.

    Form paths are tested before ``drive.google.com``, so a form link served
    from the Drive host (``drive.google.com/.../forms/d/e/...``) is labelled
    as a form rather than a Drive file.
    """
    for needles, label in LINK_LABELS:
        if any(needle in url for needle in needles):
            return label
    return DEFAULT_LINK_LABEL


def linkify(text: str) -> str:
    """Wrap every bare URL in ``[label](url)``.

    Idempotent: URLs already preceded by ``[`` or ``](`` are left alone.
    """
    return URL_RE.sub(lambda m: f"[{link_label(m.group(1))}]({m.group(1)})", text)
