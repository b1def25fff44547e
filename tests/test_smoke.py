"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import toolchat

    assert toolchat.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from toolchat.cli import main

    assert callable(main)


def test_public_modules_import() -> None:
    from toolchat.core.intents import parse_drive_intent, parse_forms_intent, parse_gmail_intent
    from toolchat.core.matching import resolve
    from toolchat.core.rendering import render
    from toolchat.core.session import CommandSession
    from toolchat.protocols.dispatcher import ServerDispatcher
    from toolchat.protocols.mcp.client import MCPClient

    assert resolve is not None
    assert render is not None
    assert CommandSession is not None
    assert MCPClient is not None
    assert ServerDispatcher is not None
    assert parse_drive_intent("help").action.value == "help"
    assert parse_gmail_intent("help").action.value == "help"
    assert parse_forms_intent("help").action.value == "help"
