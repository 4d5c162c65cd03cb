# kaggle_mcp/infrastructure/tools/kaggle_tools/auth_tool.py

import json
from typing import Dict, Any

from .base import KaggleTool

SETUP_GUIDANCE = (
    "❌ Kaggle API credentials not found. Please set up your Kaggle API key:\n\n"
    "1. Go to https://www.kaggle.com/account\n"
    "2. Create New API Token\n"
    "3. Place the downloaded kaggle.json in ~/.kaggle/ (or in $KAGGLE_CONFIG_DIR)"
)


class AuthCheckTool(KaggleTool):
    """
    Reports whether kaggle.json is present. Never runs the CLI.
    A missing or unreadable file is reported as guidance, not as an error.
    """

    @property
    def name(self) -> str:
        return "auth_check"

    @property
    def description(self) -> str:
        return "Check if Kaggle API credentials are configured"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        path = self.config.credentials_path
        try:
            with open(path, encoding="utf-8") as f:
                credentials = json.load(f)
        except (OSError, ValueError):
            return self.format_result(SETUP_GUIDANCE)
        username = credentials.get("username") if isinstance(credentials, dict) else None
        return self.format_result(f"✅ Kaggle API credentials found for user: {username}")
