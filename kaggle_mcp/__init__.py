"""
kaggle-mcp

MCP server exposing a fixed catalog of Kaggle CLI tools (list, create, push,
pull, search) to agents.
"""

__version__ = "0.1.0"
