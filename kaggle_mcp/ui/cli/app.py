"""
Interactive console for the Kaggle tool catalog.

Calls tools through the same dispatcher the MCP server uses, which makes it
handy for checking argument handling and CLI output without an agent.

Commands:
  /help      Show help
  /tools     List registered tools
  /call      Execute a tool (/call <tool_name> <json_params>)
  /auth      Check Kaggle API credentials
  /clear     Clear the screen
  /exit      Exit

Run:
  python -m kaggle_mcp.ui.cli.app
  or
  kaggle-mcp-cli
"""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.completion import WordCompleter

from rich.console import Console
from rich.theme import Theme

from kaggle_mcp.api.di.composition import build_services
from kaggle_mcp.infrastructure.observability import configure_logging
from .handlers import list_tools, show_help, handle_call, handle_auth, handle_clear

COMMANDS = ["/help", "/tools", "/call", "/auth", "/clear", "/exit"]

THEME = Theme(
    {
        "primary": "white",
        "accent": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "muted": "grey70",
    }
)


def run() -> None:
    """Main interactive loop."""
    configure_logging()
    console = Console(theme=THEME)
    catalog, dispatcher = build_services()

    tool_names = [d.name for d in catalog.list_tools()]
    completer = WordCompleter(COMMANDS + tool_names, ignore_case=True)
    session = PromptSession(history=InMemoryHistory(), completer=completer)

    console.print("[accent]Kaggle tools console[/accent] [muted](type /help for commands)[/muted]")
    while True:
        try:
            line = session.prompt("kaggle> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue

        parts = line.split(maxsplit=2)
        cmd = parts[0].lower()
        if cmd == "/exit":
            break
        elif cmd == "/help":
            show_help(console)
        elif cmd == "/tools":
            list_tools(console, catalog)
        elif cmd == "/call":
            handle_call(console, dispatcher, parts)
        elif cmd == "/auth":
            handle_auth(console, dispatcher)
        elif cmd == "/clear":
            handle_clear(console)
        else:
            console.print(f"[warning]Unknown command: {cmd}[/warning]")


if __name__ == "__main__":
    run()
