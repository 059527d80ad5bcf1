"""Domain models for a single staged build run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes owned by unics2cpp.

    Any other non-zero code comes verbatim from the toolchain process.
    """

    SUCCESS = 0
    INPUT_MISSING = 11
    OUTPUT_MISSING = 12
    INPUT_NOT_ABSOLUTE = 21
    OUTPUT_NOT_ABSOLUTE = 22
    INPUT_EQUALS_OUTPUT = 30
    INPUT_NOT_STAGED = 40
    ARTIFACT_NOT_FOUND = 50


@dataclass(frozen=True, slots=True)
class WorkRequest:
    """Validated source and destination for one run."""

    input_path: Path
    output_path: Path


@dataclass(frozen=True, slots=True)
class Workspace:
    """Paths of one ephemeral Unity project tree."""

    root: Path
    project_dir: Path
    assets_dir: Path
    source_dir: Path
    output_dir: Path
    log_path: Path


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Fully rendered toolchain command line."""

    executable: str
    arguments: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]
