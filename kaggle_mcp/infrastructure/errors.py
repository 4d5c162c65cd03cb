"""
Exceptions raised by tool handlers and caught by the dispatcher.
"""


class ToolInputError(ValueError):
    """Missing or invalid caller-supplied parameter."""


class KaggleCommandError(RuntimeError):
    """The kaggle CLI could not be launched or exited non-zero."""

    def __init__(self, detail: str, argv=None, exit_code=None):
        super().__init__(f"Kaggle command failed: {detail}")
        self.argv = list(argv or [])
        self.exit_code = exit_code
