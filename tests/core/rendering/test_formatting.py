"""Tests for the shared value formatters."""

from datetime import UTC, datetime

import pytest

from toolchat.core.rendering.formatting import (
    DEFAULT_FILE_ICON,
    file_icon,
    format_date,
    format_email_date,
    format_email_sender,
    format_size,
    strip_html_tags,
    truncate,
)


class TestFormatSize:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0 Bytes"),
            (512, "512 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1048576, "1 MB"),
            (5 * 1024**3, "5 GB"),
            (3 * 1024**4, "3072 GB"),
            ("2048", "2 KB"),
        ],
    )
    def test_scaling(self, value: object, expected: str) -> None:
        assert format_size(value) == expected

    def test_two_decimals(self) -> None:
        assert format_size(1234567) == "1.18 MB"

    def test_not_a_number(self) -> None:
        assert format_size("unknown") == "unknown"
        assert format_size(None) == "None"


class TestFileIcon:
    @pytest.mark.parametrize(
        ("mime", "icon"),
        [
            ("application/vnd.google-apps.folder", "📁"),
            ("application/vnd.google-apps.document", "📝"),
            ("application/vnd.google-apps.spreadsheet", "📊"),
            ("application/vnd.google-apps.presentation", "📽️"),
            ("image/png", "🖼️"),
            ("application/pdf", "📕"),
            ("video/mp4", "🎬"),
            ("audio/mpeg", "🎵"),
            ("application/vnd.google-apps.form", "📋"),
        ],
    )
    def test_known_types(self, mime: str, icon: str) -> None:
        assert file_icon(mime) == icon

    def test_unknown_and_missing(self) -> None:
        assert file_icon("text/plain") == DEFAULT_FILE_ICON
        assert file_icon(None) == DEFAULT_FILE_ICON


class TestDates:
    def test_format_date(self) -> None:
        assert format_date("2024-03-04T10:15:00.000Z") == "3/4/2024"

    def test_format_date_unparseable(self) -> None:
        assert format_date("last week") == "last week"

    def test_email_today(self) -> None:
        now = datetime(2024, 3, 4, 18, 0, tzinfo=UTC)
        assert format_email_date("2024-03-04T09:05:00Z", now) == "Today at 09:05 AM"

    def test_email_yesterday(self) -> None:
        now = datetime(2024, 3, 5, 8, 0, tzinfo=UTC)
        assert format_email_date("2024-03-04T21:30:00Z", now) == "Yesterday at 09:30 PM"

    def test_email_older(self) -> None:
        now = datetime(2024, 3, 20, tzinfo=UTC)
        assert format_email_date("2024-03-04T09:05:00Z", now) == "Mar 4, 2024 at 09:05 AM"

    def test_email_rfc2822(self) -> None:
        now = datetime(2024, 3, 4, 12, 0, tzinfo=UTC)
        assert format_email_date("Mon, 4 Mar 2024 09:05:00 +0000", now) == "Today at 09:05 AM"

    def test_email_unparseable(self) -> None:
        assert format_email_date("sometime") == "sometime"


class TestText:
    def test_sender_with_name(self) -> None:
        assert format_email_sender('"Jane Doe" <jane@example.com>') == "**Jane Doe** (jane@example.com)"

    def test_bare_sender(self) -> None:
        assert format_email_sender("jane@example.com") == "jane@example.com"

    def test_strip_html(self) -> None:
        html = "<p>Hello&nbsp;there</p><div>A &amp; B<br/>&lt;ok&gt;</div>"
        assert strip_html_tags(html) == "Hello there\n\nA & B\n<ok>"

    def test_truncate(self) -> None:
        assert truncate("abcdef", 3) == "abc..."
        assert truncate("abc", 3) == "abc"
