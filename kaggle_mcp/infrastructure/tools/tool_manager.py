# kaggle_mcp/infrastructure/tools/tool_manager.py

from typing import Dict, Any, List, Optional, Type

from kaggle_mcp.infrastructure.kaggle.cli_runner import KaggleCLIRunner
from kaggle_mcp.interfaces.services.tools import ICommandRunner

from .config import Config
from .tool_base import Tool
from .kaggle_tools import CATALOG_ORDER


class ToolManager:
    """
    Manages the catalog of tools: registration order, lookup and listing.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        runner: Optional[ICommandRunner] = None,
        register_defaults: bool = True,
    ):
        """
        Initialize tool registry.

        Args:
            config: Shared configuration for the Kaggle tools
            runner: Command runner injected into every Kaggle tool
            register_defaults: Whether to register the Kaggle catalog
        """
        self.config = config or Config()
        self.runner = runner or KaggleCLIRunner(command=self.config.kaggle_command)
        self.tools: Dict[str, Tool] = {}
        if register_defaults:
            self.register_default_tools()

    def register_default_tools(self) -> None:
        """Register the Kaggle tools in catalog order."""
        for tool_class in CATALOG_ORDER:
            self.register_tool_class(tool_class, config=self.config, runner=self.runner)

    def register_tool(self, tool: Tool) -> None:
        """
        Register a tool instance.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self.tools[tool.name] = tool

    def register_tool_class(self, tool_class: Type[Tool], **kwargs) -> None:
        """
        Register a tool class by instantiating and registering it.

        Args:
            tool_class: Tool class to instantiate and register
            **kwargs: Arguments to pass to tool constructor
        """
        self.register_tool(tool_class(**kwargs))

    def get_tool(self, name: str) -> Tool:
        """
        Get a registered tool by name.

        Raises:
            KeyError: If tool is not found
        """
        if name not in self.tools:
            raise KeyError(f"Tool '{name}' not found")
        return self.tools[name]

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        Get information about all registered tools, in registration order.

        Returns:
            List of dictionaries containing name, description and
            input_schema for each tool
        """
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.input_schema,
            }
            for tool in self.tools.values()
        ]
