"""
Shared test fixtures for the Kaggle tool layer.

No test launches the real kaggle CLI: tools receive a `FakeRunner` that
records every argument vector and replays canned `CommandResult`s.
"""

import os
import sys
from typing import Callable, List, Optional, Sequence

import pytest

# Ensure project root is on sys.path so 'kaggle_mcp' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from kaggle_mcp.abstractions.dto.tools import CommandResult
from kaggle_mcp.api.di.composition import build_services, build_tool_manager
from kaggle_mcp.infrastructure.tools.config import Config


class FakeRunner:
    """In-memory stand-in for KaggleCLIRunner."""

    def __init__(self, results: Optional[List[CommandResult]] = None, error: Optional[Exception] = None):
        self.calls: List[List[str]] = []
        self.results = list(results or [])
        self.error = error
        self.on_run: Optional[Callable[[Sequence[str]], None]] = None

    def run(self, argv: Sequence[str]) -> CommandResult:
        self.calls.append(list(argv))
        if self.on_run is not None:
            self.on_run(argv)
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return CommandResult(stdout="ok", stderr="", exit_code=0)

    def respond(self, stdout: str = "", stderr: str = "", exit_code: int = 0) -> None:
        self.results.append(CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code))


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config(tmp_path):
    """Config with every path under tmp_path."""
    staging = tmp_path / "staging"
    staging.mkdir()
    return Config(
        home_dir=str(tmp_path / "home"),
        config_dir=str(tmp_path / "kaggle-config"),
        temp_dir=str(staging),
        kaggle_command="kaggle",
    )


@pytest.fixture
def manager(config, runner):
    return build_tool_manager(config, runner)


@pytest.fixture
def services(config, runner):
    return build_services(config, runner)


@pytest.fixture
def catalog(services):
    return services[0]


@pytest.fixture
def dispatcher(services):
    return services[1]


def result_text(result) -> str:
    """Text of a single-item ToolResult."""
    assert len(result["content"]) == 1
    item = result["content"][0]
    assert item["type"] == "text"
    return item["text"]
