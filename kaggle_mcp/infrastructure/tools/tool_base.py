# kaggle_mcp/infrastructure/tools/tool_base.py
"""
Base classes for MCP tool implementations.
Based on: https://modelcontextprotocol.io/docs/concepts/tools
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Mapping, TypedDict

from kaggle_mcp.infrastructure.errors import ToolInputError
from kaggle_mcp.infrastructure.kaggle.cli_runner import format_output


class TextContent(TypedDict):
    type: str
    text: str


class ToolResult(TypedDict):
    content: List[TextContent]


class Tool(ABC):
    """
    Abstract base class for catalog tools.

    Subclasses raise on failure; the dispatcher turns exceptions into
    `Error: ...` results.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in the catalog."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """
        JSONSchema object defining accepted parameters.
        Must include:
        - type: "object"
        - properties: Parameter definitions
        - required: List of required parameters (may be empty)
        """
        pass

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> ToolResult:
        """Execute the tool with validated input parameters."""
        pass

    def validate(self, input: Mapping[str, Any]) -> None:
        """
        Check the schema's required fields are present.

        Raises:
            ToolInputError: If any required field is missing or null
        """
        missing = [
            key for key in self.input_schema.get("required", [])
            if input.get(key) is None
        ]
        if missing:
            raise ToolInputError(f"Missing required parameter(s): {', '.join(missing)}")

    def get_tool_definition(self) -> Dict[str, Any]:
        """Get the tool definition in MCP's format."""
        schema = self.input_schema
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": schema.get("properties", {}),
                "required": schema.get("required", []),
            },
        }

    def format_result(self, content: Any) -> ToolResult:
        """Wrap text (or parsed JSON) in the result envelope."""
        return {"content": [{"type": "text", "text": format_output(content)}]}

    @staticmethod
    def format_error(error: str) -> ToolResult:
        """Wrap an error description in the result envelope."""
        return {"content": [{"type": "text", "text": f"Error: {error}"}]}
