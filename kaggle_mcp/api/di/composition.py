"""
Composition module for server and CLI DI (edge wiring).
"""

from __future__ import annotations

from typing import Optional, Tuple, TYPE_CHECKING

from kaggle_mcp.infrastructure.tools.config import Config
from kaggle_mcp.infrastructure.tools.tool_manager import ToolManager

if TYPE_CHECKING:
    from kaggle_mcp.interfaces.services.tools import ICommandRunner, IToolCatalog, IToolDispatcher


def build_tool_manager(config: Optional[Config] = None, runner: Optional["ICommandRunner"] = None) -> ToolManager:
    """
    Construct the registry holding the Kaggle catalog.
    """
    return ToolManager(config=config or Config(), runner=runner, register_defaults=True)


def build_tool_catalog(manager: ToolManager) -> "IToolCatalog":
    from kaggle_mcp.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
    return ToolManagerCatalogAdapter(manager)


def build_tool_dispatcher(manager: ToolManager) -> "IToolDispatcher":
    from kaggle_mcp.infrastructure.tools.invocation_adapter import ToolInvocationAdapter
    return ToolInvocationAdapter(manager)


def build_services(
    config: Optional[Config] = None,
    runner: Optional["ICommandRunner"] = None,
) -> Tuple["IToolCatalog", "IToolDispatcher"]:
    """
    Catalog and dispatcher sharing one ToolManager.
    """
    manager = build_tool_manager(config, runner)
    return build_tool_catalog(manager), build_tool_dispatcher(manager)
