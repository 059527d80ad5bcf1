"""Build entry point executed inside the editor via ``-executeMethod``.

The editor supplies its own PlayerSettings, build pipeline and scene list; the
host process only controls the argument vector. After the player build, the
IL2CPP intermediate sources are copied to ``<project>/output`` where the host
harvests them.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from unics2cpp.editor.arguments import get_enum_argument
from unics2cpp.editor.enums import BuildTarget, BuildTargetGroup
from unics2cpp.editor.player_settings import PlayerSettingsApi, apply_player_settings

logger = logging.getLogger(__name__)

OUTPUT_BASE_NAME = "bin"
PUBLIC_OUTPUT_DIR = "output"
INTERMEDIATE_OUTPUT_DIR = Path("Temp", "StagingArea", "Il2Cpp", "il2cppOutput")
GENERATED_SOURCE_PATTERN = "*.cpp"

_TARGET_GROUPS: dict[BuildTarget, BuildTargetGroup] = {
    BuildTarget.ANDROID: BuildTargetGroup.ANDROID,
}


class BuildToolError(RuntimeError):
    """Editor-side build could not be configured."""


class UnsupportedBuildTargetError(BuildToolError):
    """Build target resolved, but this tool does not build for it."""


class BuildPipelineApi(Protocol):
    """The editor's player build entry point."""

    def build_player(
        self,
        scenes: Sequence[str],
        location_path_name: str,
        target: BuildTarget,
    ) -> None: ...


@dataclass(slots=True)
class EditorScene:
    """One entry of the editor build settings scene list."""

    path: str
    enabled: bool = True


@dataclass(slots=True)
class BuildReport:
    """What the editor-side build applied and produced."""

    target: BuildTarget
    target_group: BuildTargetGroup
    scenes: list[str]
    applied_settings: dict[str, object] = field(default_factory=dict)
    generated_files: list[Path] = field(default_factory=list)


def resolve_target_group(target: BuildTarget | None) -> BuildTargetGroup:
    if target is None:
        raise BuildToolError(f"'--{BuildTarget.__name__} <value>' is not found.")
    try:
        return _TARGET_GROUPS[target]
    except KeyError as error:
        raise UnsupportedBuildTargetError(
            f"unics2cpp does not support build target {target.name}.",
        ) from error


def build(
    *,
    args: Sequence[str],
    project_dir: Path,
    player_settings: PlayerSettingsApi,
    pipeline: BuildPipelineApi,
    scenes: Sequence[EditorScene],
) -> BuildReport:
    """Configure PlayerSettings from ``args``, build the player, export sources."""

    target = get_enum_argument(args, BuildTarget)
    target_group = resolve_target_group(target)

    levels = [scene.path for scene in scenes if scene.enabled]
    applied = apply_player_settings(args, player_settings, target_group)
    logger.info(
        "Building %s (%s) with %d scene(s); applied settings: %s",
        target.name,
        target_group.name,
        len(levels),
        ", ".join(sorted(applied)) or "none",
    )

    pipeline.build_player(levels, OUTPUT_BASE_NAME, target)
    generated = export_generated_sources(project_dir)
    return BuildReport(
        target=target,
        target_group=target_group,
        scenes=levels,
        applied_settings=applied,
        generated_files=generated,
    )


def export_generated_sources(project_dir: Path) -> list[Path]:
    """Copy top-level generated ``.cpp`` files into the public output folder.

    Existing files in the output folder are never overwritten.
    """

    source_dir = project_dir / INTERMEDIATE_OUTPUT_DIR
    dest_dir = project_dir / PUBLIC_OUTPUT_DIR
    if not source_dir.is_dir():
        raise FileNotFoundError(f"IL2CPP output directory not found: {source_dir}")
    files = sorted(path for path in source_dir.glob(GENERATED_SOURCE_PATTERN) if path.is_file())
    dest_dir.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for file in files:
        target_path = dest_dir / file.name
        if target_path.exists():
            raise FileExistsError(f"Generated source already exported: {target_path}")
        shutil.copyfile(file, target_path)
        copied.append(target_path)
    return copied
