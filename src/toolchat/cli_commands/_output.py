"""Shared CLI output formatters."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from toolchat.core.catalog import ToolCatalog  # noqa: TC001
from toolchat.core.config import ServerRegistry  # noqa: TC001
from toolchat.core.matching import MatchResult  # noqa: TC001
from toolchat.core.session import Reply  # noqa: TC001

console = Console()


def print_tools_table(catalog: ToolCatalog, *, title: str = "Discovered Tools") -> None:
    """Pretty-print a catalog as a table."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in catalog:
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(tool.required) or "-",
        )

    console.print(table)


def print_match(result: MatchResult) -> None:
    """Show a resolution record without invoking anything."""
    if result.tool is None:
        console.print("[yellow]No matching tool.[/yellow]")
        return

    console.print(f"[bold]Tool:[/bold] {result.tool.name}")
    console.print(f"[bold]Rule:[/bold] {result.rule}")
    console.print(f"[bold]Arguments:[/bold] {escape(json.dumps(result.args, ensure_ascii=False))}")
    missing = ", ".join(result.missing_required) or "-"
    console.print(f"[bold]Missing required:[/bold] {missing}")


def print_servers_table(registry: ServerRegistry) -> None:
    table = Table(title="Configured Servers")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("URL")

    for ref in registry.servers:
        table.add_row(ref.id, ref.name, ref.base_url + (ref.path if ref.path != "/" else ""))

    console.print(table)


def print_status_table(
    registry: ServerRegistry,
    outcomes: dict[str, ToolCatalog | BaseException],
) -> None:
    """One row per server: tool count, or the discovery error."""
    table = Table(title="Server Status")
    table.add_column("ID", style="cyan")
    table.add_column("Status")
    table.add_column("Tools")

    for ref in registry.servers:
        outcome = outcomes.get(ref.id)
        if isinstance(outcome, BaseException):
            table.add_row(ref.id, "[red]error[/red]", escape(_truncate(str(outcome), 60)))
        elif outcome is None:
            table.add_row(ref.id, "[yellow]skipped[/yellow]", "-")
        else:
            table.add_row(ref.id, "[green]ok[/green]", str(len(outcome)))

    console.print(table)


def print_reply(reply: Reply, *, raw: bool = False) -> None:
    """Print a session reply; markdown is rendered unless *raw*."""
    if reply.role == "error":
        console.print(f"[red]Error:[/red] {escape(reply.content)}", highlight=False)
        return
    if raw:
        click.echo(reply.content)
        return
    console.print(Markdown(reply.content))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
