# kaggle_mcp/infrastructure/tools/kaggle_tools/discovery_tools.py
"""
Read-only catalog queries: dataset search and competition listing.
"""

from typing import Any, Dict

from kaggle_mcp.infrastructure.kaggle import commands
from kaggle_mcp.infrastructure.kaggle.params import COMPETITION_GROUPS, DEFAULT_CATEGORY, DEFAULT_GROUP

from .base import KaggleTool


class SearchDatasetsTool(KaggleTool):

    @property
    def name(self) -> str:
        return "search_datasets"

    @property
    def description(self) -> str:
        return "Search for Kaggle datasets"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "search": {"type": "string", "description": "Search query"},
                "page": {"type": "number", "description": "Page number", "default": 1},
            },
            "required": ["search"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        return self.format_result(self.kaggle(commands.search_datasets_args(params)))


class ListCompetitionsTool(KaggleTool):
    """
    Lists competitions. group/category equal to their defaults are left off
    the command line; the CLI applies the same defaults itself.
    """

    @property
    def name(self) -> str:
        return "list_competitions"

    @property
    def description(self) -> str:
        return "List Kaggle competitions"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "group": {
                    "type": "string",
                    "description": "Competition group (general, entered, inClass)",
                    "default": DEFAULT_GROUP,
                    "enum": list(COMPETITION_GROUPS),
                },
                "category": {
                    "type": "string",
                    "description": (
                        "Competition category (all, featured, research, recruitment, "
                        "gettingStarted, masters, playground)"
                    ),
                    "default": DEFAULT_CATEGORY,
                },
                "sortBy": {
                    "type": "string",
                    "description": (
                        "Sort by (grouped, prize, earliestDeadline, latestDeadline, "
                        "numberOfTeams, recentlyCreated)"
                    ),
                    "default": "recentlyCreated",
                },
            },
            "required": [],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        return self.format_result(self.kaggle(commands.list_competitions_args(params)))
