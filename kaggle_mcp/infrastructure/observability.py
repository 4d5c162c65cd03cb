"""
Logging setup.

stdout carries the MCP stream, so every handler writes to stderr.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from kaggle_mcp.infrastructure.tools.config import Config


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Install a stderr RichHandler on the root logger and return the package logger."""
    level_name = (level or Config.LOG_LEVEL or "INFO").upper()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    return logging.getLogger("kaggle_mcp")
