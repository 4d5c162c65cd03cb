"""
Tool catalog, dispatch and command-runner ports.
"""
from __future__ import annotations
from typing import Protocol, List, Optional, Dict, Any, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from kaggle_mcp.abstractions.dto.tools import ToolDescriptor, CommandResult
    from kaggle_mcp.infrastructure.tools.tool_base import ToolResult


class IToolCatalog(Protocol):
    def list_tools(self) -> List["ToolDescriptor"]:
        ...

    def get_tool(self, name: str) -> Optional["ToolDescriptor"]:
        ...


class IToolDispatcher(Protocol):
    def execute(self, name: str, params: Optional[Dict[str, Any]]) -> "ToolResult":
        ...


class ICommandRunner(Protocol):
    def run(self, argv: Sequence[str]) -> "CommandResult":
        ...


__all__ = ["IToolCatalog", "IToolDispatcher", "ICommandRunner"]
