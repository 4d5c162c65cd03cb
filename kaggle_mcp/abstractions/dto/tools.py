"""
Shared tool DTOs for catalogs and external command results.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    raw_schema: Dict[str, Any]


@dataclass(frozen=True)
class CommandResult:
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


__all__ = ["ToolDescriptor", "CommandResult"]
