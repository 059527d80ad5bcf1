"""Ephemeral Unity project materialization for one build run."""

from __future__ import annotations

import json
import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from unics2cpp.build.models import Workspace

logger = logging.getLogger(__name__)

ASSETS_DIR_NAME = "Assets"
SCENES_DIR_NAME = "Scenes"
EDITOR_DIR_NAME = "Editor"
OUTPUT_DIR_NAME = "output"
SCENE_FILE_NAME = "scene.unity"
SCENE_HEADER = "%YAML 1.1\n"
LOG_FILE_NAME = "batch.log"
MODULE_DESCRIPTOR_SUFFIX = ".asmdef"
SOURCE_SUFFIX = ".cs"
WORKSPACE_PREFIX = "unics2cpp-"


class WorkspaceManager:
    """Creates, stages and removes per-run project trees.

    Every workspace gets a fresh random directory under ``temp_root`` (the
    system temp dir when unset), so concurrent runs never share one.
    """

    def __init__(
        self,
        *,
        project_token: str,
        helper_binary_path: Path,
        temp_root: Path | None = None,
    ) -> None:
        self.project_token = project_token
        self.helper_binary_path = helper_binary_path
        self.temp_root = temp_root

    @contextmanager
    def open(self) -> Iterator[Workspace]:
        """Yield a fresh workspace and remove it on every exit path."""

        workspace = self.create()
        try:
            yield workspace
        finally:
            self.destroy(workspace)

    def create(self) -> Workspace:
        if self.temp_root is not None:
            self.temp_root.mkdir(parents=True, exist_ok=True)
        root = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=self.temp_root))
        workspace = self._layout(root)
        try:
            self._write_skeleton(workspace)
        except BaseException:
            self.destroy(workspace)
            raise
        logger.info("Workspace created at %s", root)
        return workspace

    def stage_input(self, workspace: Workspace, source_path: Path) -> bool:
        """Copy the caller's source into the project source slot.

        A missing source is skipped, not raised; the return value tells the
        caller whether anything was staged.
        """

        if not source_path.is_file():
            logger.warning("Input file %s does not exist; nothing staged", source_path)
            return False
        destination = self.source_path(workspace)
        shutil.copyfile(source_path, destination)
        logger.info("Staged %s as %s", source_path, destination)
        return True

    def destroy(self, workspace: Workspace) -> None:
        if not workspace.root.exists():
            return
        shutil.rmtree(workspace.root)
        logger.info("Workspace %s removed", workspace.root)

    def source_path(self, workspace: Workspace) -> Path:
        return workspace.source_dir / f"{self.project_token}{SOURCE_SUFFIX}"

    def _layout(self, root: Path) -> Workspace:
        project_dir = root / self.project_token
        assets_dir = project_dir / ASSETS_DIR_NAME
        return Workspace(
            root=root,
            project_dir=project_dir,
            assets_dir=assets_dir,
            source_dir=assets_dir / self.project_token,
            output_dir=project_dir / OUTPUT_DIR_NAME,
            log_path=root / LOG_FILE_NAME,
        )

    def _write_skeleton(self, workspace: Workspace) -> None:
        workspace.source_dir.mkdir(parents=True, exist_ok=True)
        descriptor_path = workspace.source_dir / f"{self.project_token}{MODULE_DESCRIPTOR_SUFFIX}"
        descriptor_path.write_text(
            json.dumps({"name": self.project_token}, indent=2) + "\n",
            "utf-8",
        )

        scenes_dir = workspace.assets_dir / SCENES_DIR_NAME
        scenes_dir.mkdir(parents=True, exist_ok=True)
        (scenes_dir / SCENE_FILE_NAME).write_text(SCENE_HEADER, "utf-8")

        editor_dir = workspace.assets_dir / EDITOR_DIR_NAME
        editor_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.helper_binary_path, editor_dir / self.helper_binary_path.name)
