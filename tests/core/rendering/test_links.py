"""Tests for URL link-ification."""

import pytest

from toolchat.core.rendering.links import link_label, linkify


class TestLinkLabel:
    @pytest.mark.parametrize(
        ("url", "label"),
        [
            ("https://docs.google.com/forms/d/abc/edit", "📝 Open Form"),
            ("https://example.com/forms/d/e/xyz/viewform", "📝 Open Form"),
            ("https://docs.google.com/document/d/abc", "📄 Open Document"),
            ("https://docs.google.com/spreadsheets/d/abc", "📊 Open Spreadsheet"),
            ("https://drive.google.com/file/d/abc/view", "📂 Open in Drive"),
            ("https://example.com/page", "Open Link"),
        ],
    )
    def test_labels(self, url: str, label: str) -> None:
        assert link_label(url) == label

    def test_form_path_beats_drive_domain(self) -> None:
        assert link_label("https://drive.google.com/forms/d/e/abc") == "📝 Open Form"


class TestLinkify:
    def test_bare_url(self) -> None:
        assert linkify("See https://example.com/a for details") == (
            "See [Open Link](https://example.com/a) for details"
        )

    def test_multiple_urls(self) -> None:
        text = "A: https://docs.google.com/document/d/1 B: http://example.com"
        assert linkify(text) == (
            "A: [📄 Open Document](https://docs.google.com/document/d/1) "
            "B: [Open Link](http://example.com)"
        )

    def test_url_ends_at_paren(self) -> None:
        assert linkify("(https://example.com)") == "([Open Link](https://example.com))"

    def test_existing_links_untouched(self) -> None:
        text = "[Open Form](https://docs.google.com/forms/d/e/abc/viewform)"
        assert linkify(text) == text

    def test_idempotent(self) -> None:
        text = "Created: https://docs.google.com/forms/d/e/abc/viewform and https://example.com/x"
        once = linkify(text)
        assert linkify(once) == once

    def test_no_urls(self) -> None:
        assert linkify("nothing to see") == "nothing to see"
