"""Options and helpers shared by the server-facing commands."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from toolchat.cli_commands._output import console

if TYPE_CHECKING:
    from toolchat.core.config import ServerRegistry

F = TypeVar("F", bound=Callable[..., Any])


def connection_options(func: F) -> F:
    """``--token`` (env ``TOOLCHAT_TOKEN``) and ``--origin``."""
    func = click.option(
        "--origin",
        default=None,
        help="Origin header to send with every request.",
    )(func)
    func = click.option(
        "--token",
        envvar="TOOLCHAT_TOKEN",
        default=None,
        help="Bearer credential for the server.",
    )(func)
    return func


def load_registry(ctx: click.Context) -> ServerRegistry:
    """The registry from ``--config``, else the environment defaults."""
    from toolchat.core.config import ConfigError, default_servers, load_servers

    path = (ctx.obj or {}).get("config_path")
    if path is None:
        return default_servers()
    try:
        return load_servers(path)
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)
