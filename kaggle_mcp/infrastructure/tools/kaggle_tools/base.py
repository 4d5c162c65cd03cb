"""
Shared plumbing for tools backed by the kaggle CLI.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from kaggle_mcp.infrastructure.kaggle.cli_runner import KaggleCLIRunner, execute_kaggle_command, format_output
from kaggle_mcp.infrastructure.kaggle.params import parse_params
from kaggle_mcp.infrastructure.tools.config import Config
from kaggle_mcp.infrastructure.tools.tool_base import Tool, ToolResult
from kaggle_mcp.interfaces.services.tools import ICommandRunner

NOTEBOOK_SLUG_PROPERTY = {
    "type": "string",
    "description": "Notebook identifier (username/notebook-slug)",
}


class KaggleTool(Tool):
    """Tool with an injected Config and command runner."""

    def __init__(self, config: Optional[Config] = None, runner: Optional[ICommandRunner] = None):
        self.config = config or Config()
        self.runner = runner or KaggleCLIRunner(command=self.config.kaggle_command)

    def parse(self, input: Dict[str, Any]):
        return parse_params(self.name, input)

    def kaggle(self, argv: Sequence[str]) -> Any:
        return execute_kaggle_command(self.runner, argv)

    def format_message(self, message: str, output: Any) -> ToolResult:
        """Success line followed by the command output."""
        return self.format_result(f"{message}\n{format_output(output)}")
