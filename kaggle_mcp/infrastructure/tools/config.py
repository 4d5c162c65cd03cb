"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading overrides from a .env file
2. Locating the Kaggle credential file (KAGGLE_CONFIG_DIR or ~/.kaggle)
3. Choosing the kaggle executable and the staging temp base

Instances accept explicit overrides so callers (and tests) can pin paths
instead of relying on process-wide environment lookups.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration for the Kaggle tool layer."""

    # External program
    KAGGLE_CLI: str = os.getenv('KAGGLE_CLI', 'kaggle')

    # Credential location (kaggle.json lives directly inside this dir when set)
    KAGGLE_CONFIG_DIR: str = os.getenv('KAGGLE_CONFIG_DIR', '')

    # Base directory for staging dirs; falls back to the platform temp dir
    TMPDIR: str = os.getenv('TMPDIR', '')

    LOG_LEVEL: str = os.getenv('KAGGLE_MCP_LOG_LEVEL', 'INFO')

    # File names the kaggle CLI expects side by side in a push directory.
    # The CLI only reads kernel-metadata.json, whatever the tool naming.
    NOTEBOOK_FILENAME: str = 'notebook.ipynb'
    METADATA_FILENAME: str = 'kernel-metadata.json'
    CREDENTIALS_FILENAME: str = 'kaggle.json'

    def __init__(
        self,
        home_dir: Optional[str] = None,
        config_dir: Optional[str] = None,
        temp_dir: Optional[str] = None,
        kaggle_command: Optional[str] = None,
    ):
        """
        Initialize configuration.

        Args:
            home_dir: Home directory used for ~/.kaggle (default: user home)
            config_dir: Directory holding kaggle.json (default: KAGGLE_CONFIG_DIR)
            temp_dir: Base directory for staging dirs (default: TMPDIR or system temp)
            kaggle_command: kaggle executable name or path (default: KAGGLE_CLI)
        """
        self.home_dir = Path(home_dir) if home_dir else Path.home()
        self.config_dir = config_dir if config_dir is not None else (self.KAGGLE_CONFIG_DIR or None)
        self.temp_dir = temp_dir or self.TMPDIR or tempfile.gettempdir()
        self.kaggle_command = kaggle_command or self.KAGGLE_CLI

    @property
    def credentials_path(self) -> Path:
        """Path of kaggle.json, honouring the config-dir override."""
        if self.config_dir:
            return Path(self.config_dir) / self.CREDENTIALS_FILENAME
        return self.home_dir / '.kaggle' / self.CREDENTIALS_FILENAME

    def __repr__(self) -> str:
        return (
            f"Config(kaggle_command={self.kaggle_command!r}, "
            f"credentials_path={str(self.credentials_path)!r}, temp_dir={self.temp_dir!r})"
        )
