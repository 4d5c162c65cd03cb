"""
kaggle CLI invocation and output normalization.

`KaggleCLIRunner` is the only place a process is spawned. It reports the raw
outcome; `execute_kaggle_command` turns that outcome into parsed output or a
`KaggleCommandError`. A non-zero exit (or a launch failure) is the only
failure signal: stderr is logged but never fails a call on its own.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, List, Sequence

from kaggle_mcp.abstractions.dto.tools import CommandResult
from kaggle_mcp.infrastructure.errors import KaggleCommandError
from kaggle_mcp.interfaces.services.tools import ICommandRunner

logger = logging.getLogger(__name__)


class KaggleCLIRunner:
    """Runs the kaggle executable synchronously with captured output."""

    def __init__(self, command: str = "kaggle"):
        self.command = command

    def run(self, argv: Sequence[str]) -> CommandResult:
        """
        Run `<command> *argv` and wait for it to exit.

        Raises:
            OSError: If the executable cannot be launched
        """
        cmd: List[str] = [self.command, *argv]
        logger.debug("Running %s", cmd)
        completed = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
        return CommandResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )


def parse_output(stdout: str) -> Any:
    """Parsed JSON when stdout is JSON, otherwise stdout unchanged."""
    try:
        return json.loads(stdout)
    except ValueError:
        return stdout


def format_output(value: Any) -> str:
    """Strings verbatim; parsed JSON re-serialized with two-space indentation."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def execute_kaggle_command(runner: ICommandRunner, argv: Sequence[str]) -> Any:
    """
    Run a kaggle command through `runner` and parse its stdout.

    Returns:
        Parsed JSON value, or stdout text when it is not JSON

    Raises:
        KaggleCommandError: If the process cannot be launched or exits non-zero
    """
    try:
        result = runner.run(list(argv))
    except OSError as e:
        raise KaggleCommandError(str(e), argv=argv) from e

    if result.stderr:
        logger.warning("Kaggle stderr: %s", result.stderr.strip())

    if not result.ok:
        detail = result.stderr.strip() or result.stdout.strip()
        message = f"'kaggle {' '.join(argv)}' exited with status {result.exit_code}"
        if detail:
            message = f"{message}: {detail}"
        raise KaggleCommandError(message, argv=argv, exit_code=result.exit_code)

    return parse_output(result.stdout)
