"""
Command handlers for CLI.
"""
from __future__ import annotations

import json
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from kaggle_mcp.interfaces.services.tools import IToolCatalog, IToolDispatcher


def list_tools(console: Console, catalog: IToolCatalog) -> None:
    """Render a table of registered tools."""
    table = Table(title="Registered Tools", box=ROUNDED)
    table.add_column("Name", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required Params")

    for descriptor in catalog.list_tools():
        req = ", ".join(descriptor.raw_schema.get("required", []))
        table.add_row(descriptor.name, descriptor.description, req or "-")

    console.print(table)


def show_help(console: Console) -> None:
    """Print help panel."""
    console.print(
        Panel(
            "Commands\n"
            "/help      Show help\n"
            "/tools     List registered tools\n"
            "/call      Execute a tool directly (e.g., /call list_notebooks {\"page\": 2})\n"
            "/auth      Check Kaggle API credentials\n"
            "/clear     Clear the screen\n"
            "/exit      Exit",
            title="Help",
            box=ROUNDED,
        )
    )


def _print_result(console: Console, tool_name: str, result) -> None:
    text = "\n".join(item["text"] for item in result["content"])
    title = f"Tool Error: {tool_name}" if text.startswith("Error:") else f"Tool Result: {tool_name}"
    console.print(Panel(Text(text), title=title, box=ROUNDED))


def handle_call(console: Console, dispatcher: IToolDispatcher, parts: List[str]) -> None:
    """Handle /call command. Params default to {} when omitted."""
    if len(parts) < 2:
        console.print("Usage: /call <tool_name> [json_params]", markup=False)
        return
    tool_name = parts[1].strip()
    params_raw = parts[2].strip() if len(parts) > 2 else "{}"
    try:
        params = json.loads(params_raw)
    except ValueError as e:
        console.print(f"[bold red]Invalid JSON: {e}[/bold red]")
        return
    if not isinstance(params, dict):
        console.print("[bold red]Params must be a JSON object[/bold red]")
        return
    _print_result(console, tool_name, dispatcher.execute(tool_name, params))


def handle_auth(console: Console, dispatcher: IToolDispatcher) -> None:
    """Handle /auth command."""
    _print_result(console, "auth_check", dispatcher.execute("auth_check", {}))


def handle_clear(console: Console) -> None:
    console.clear()
