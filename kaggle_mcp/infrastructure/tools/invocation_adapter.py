"""
Tool dispatcher implementing IToolDispatcher interface.

Every failure after the arguments check is returned as an `Error: ...`
result. A missing arguments object is raised to the transport instead, since
no tool context exists yet.
"""

import logging
from typing import Dict, Any, Optional

from .tool_base import Tool, ToolResult
from .tool_manager import ToolManager

logger = logging.getLogger(__name__)


class ToolInvocationAdapter:
    """
    Adapter for ToolManager to implement IToolDispatcher interface.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager or ToolManager(register_defaults=True)

    def execute(self, name: str, params: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Execute a tool by name with given parameters.

        Raises:
            ValueError: If params is None
        """
        if params is None:
            raise ValueError("No arguments provided")

        logger.debug("Calling tool %s with %s", name, params)
        try:
            try:
                tool = self.manager.get_tool(name)
            except KeyError:
                raise ValueError(f"Unknown tool: {name}") from None
            tool.validate(params)
            return tool.run(params)
        except Exception as e:
            logger.warning("Tool %s failed: %s", name, e)
            return Tool.format_error(str(e))
