"""Toolchain backend implementations."""

from unics2cpp.build.backend.base import ToolchainBackend, ToolchainRunRequest, ToolchainRunResult
from unics2cpp.build.backend.cli_backend import (
    ToolchainLaunchError,
    UnityCliBackend,
    build_command_spec,
)

__all__ = [
    "ToolchainBackend",
    "ToolchainLaunchError",
    "ToolchainRunRequest",
    "ToolchainRunResult",
    "UnityCliBackend",
    "build_command_spec",
]
