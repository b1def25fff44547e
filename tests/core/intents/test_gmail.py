"""Tests for the mail intent parser."""

import pytest

from toolchat.core.intents import GmailAction, parse_gmail_intent
from toolchat.core.intents.gmail import gmail_parser


class TestGmailInbox:
    @pytest.mark.parametrize(
        "text",
        ["Show my inbox", "check email", "latest mail", "show me 5 emails", "get my mail", "mail"],
    )
    def test_inbox(self, text: str) -> None:
        assert parse_gmail_intent(text).action == GmailAction.INBOX


class TestGmailSearch:
    def test_search_about(self) -> None:
        intent = parse_gmail_intent("Search emails about Project Update")
        assert intent.action == GmailAction.SEARCH
        assert intent.query == "project update"

    def test_find_from(self) -> None:
        intent = parse_gmail_intent("find emails from john@example.com")
        assert intent.action == GmailAction.SEARCH
        assert intent.query == "john@example.com"


class TestGmailSend:
    def test_quoted_message(self) -> None:
        intent = parse_gmail_intent("Send 'Hello!' to friend@example.com")
        assert intent.action == GmailAction.SEND
        assert intent.to == "friend@example.com"
        assert intent.body == "Hello!"
        assert intent.subject == "Hello!"

    def test_long_quoted_message_shortens_subject(self) -> None:
        body = "x" * 60
        intent = parse_gmail_intent(f"send '{body}' to a@b.co")
        assert intent.body == body
        assert intent.subject == "x" * 47 + "..."

    def test_saying(self) -> None:
        intent = parse_gmail_intent("Email to boss@work.com saying Meeting confirmed")
        assert intent.action == GmailAction.SEND
        assert intent.to == "boss@work.com"
        assert intent.body == "Meeting confirmed"
        assert intent.subject is None

    def test_explicit_subject(self) -> None:
        intent = parse_gmail_intent("compose to a@b.co with subject: Q3 plan")
        assert intent.action == GmailAction.SEND
        assert intent.subject == "Q3 plan"

    def test_explicit_subject_overrides_quoted(self) -> None:
        intent = parse_gmail_intent("send 'hi there' to a@b.co subject: Greetings")
        assert intent.subject == "Greetings"
        assert intent.body == "hi there"

    def test_without_recipient(self) -> None:
        intent = parse_gmail_intent("draft a note")
        assert intent.action == GmailAction.SEND
        assert intent.to is None


class TestGmailPrecedence:
    def test_labels(self) -> None:
        assert parse_gmail_intent("show my labels").action == GmailAction.LABELS

    def test_inbox_beats_labels(self) -> None:
        assert parse_gmail_intent("inbox folders").action == GmailAction.INBOX

    def test_help_and_unknown(self) -> None:
        assert parse_gmail_intent("help").action == GmailAction.HELP
        assert parse_gmail_intent("order pizza").action == GmailAction.UNKNOWN

    def test_rule_order(self) -> None:
        assert [r.name for r in gmail_parser.rules] == ["inbox", "search", "labels", "send", "help"]
