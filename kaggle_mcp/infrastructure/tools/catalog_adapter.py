"""
Tool catalog adapter implementing IToolCatalog interface.
"""

from typing import List, Optional
from kaggle_mcp.abstractions.dto.tools import ToolDescriptor

from .tool_manager import ToolManager


class ToolManagerCatalogAdapter:
    """
    Adapter for ToolManager to implement IToolCatalog interface.
    Listing has no side effects and does not depend on call history.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager or ToolManager(register_defaults=True)

    def list_tools(self) -> List[ToolDescriptor]:
        """
        List all registered tools as ToolDescriptor objects.
        """
        return [
            ToolDescriptor(
                name=info["name"],
                description=info["description"],
                raw_schema=info["input_schema"],
            )
            for info in self.manager.list_tools()
        ]

    def get_tool(self, name: str) -> Optional[ToolDescriptor]:
        """
        Get a tool descriptor by name.
        """
        try:
            tool = self.manager.get_tool(name)
        except KeyError:
            return None
        return ToolDescriptor(
            name=tool.name,
            description=tool.description,
            raw_schema=tool.input_schema,
        )
