"""Backend interface for toolchain invocation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from unics2cpp.build.models import CommandSpec


@dataclass(slots=True)
class ToolchainRunRequest:
    """Inputs required to run the toolchain once."""

    command: CommandSpec
    log_path: Path


@dataclass(slots=True)
class ToolchainRunResult:
    """Execution outcome from the toolchain process."""

    exit_code: int
    log_path: Path


class ToolchainBackend(Protocol):
    """Protocol implemented by toolchain runners."""

    def run(self, request: ToolchainRunRequest) -> ToolchainRunResult:
        """Run the toolchain to completion and return its exit code."""
