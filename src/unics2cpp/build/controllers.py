"""Controller for the build CLI command."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from unics2cpp.build.backend import (
    ToolchainBackend,
    ToolchainRunRequest,
    UnityCliBackend,
    build_command_spec,
)
from unics2cpp.build.harvest import harvest_artifact
from unics2cpp.build.models import ExitCode, WorkRequest
from unics2cpp.build.validation import validate_arguments
from unics2cpp.build.workspace import WorkspaceManager
from unics2cpp.config import Settings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildCommand:
    """CLI input for one conversion run."""

    input_path: str | None
    output_path: str | None
    strict: bool = False


@dataclass(slots=True)
class BuildResult:
    """Run outcome to render in CLI."""

    exit_code: int
    lines: list[str] = field(default_factory=list)
    artifact_path: Path | None = None
    workspace_root: Path | None = None


class BuildCliController:
    """Sequences validation, staging, toolchain run and harvesting."""

    def __init__(self, backend: ToolchainBackend | None = None) -> None:
        self.backend = backend or UnityCliBackend()

    def run(self, command: BuildCommand) -> BuildResult:
        checked = validate_arguments(command.input_path, command.output_path)
        if checked.request is None or checked.exit_code is not None:
            return BuildResult(
                exit_code=int(checked.exit_code),
                lines=[f"[Error] {checked.error_summary}"],
            )

        settings = Settings.from_env()
        if command.strict:
            settings.policy.strict_staging = True
            settings.policy.strict_harvest = True
        settings.validate()
        return self._execute(checked.request, settings)

    def _execute(self, request: WorkRequest, settings: Settings) -> BuildResult:
        manager = WorkspaceManager(
            project_token=settings.workspace.project_token,
            helper_binary_path=settings.workspace.helper_binary_path,
            temp_root=settings.workspace.temp_root,
        )
        with manager.open() as workspace:
            staged = manager.stage_input(workspace, request.input_path)
            if not staged and settings.policy.strict_staging:
                return BuildResult(
                    exit_code=int(ExitCode.INPUT_NOT_STAGED),
                    lines=[f"[Error] input file '{request.input_path}' was not staged."],
                    workspace_root=workspace.root,
                )

            command_spec = build_command_spec(settings=settings.toolchain, workspace=workspace)
            run_result = self.backend.run(
                ToolchainRunRequest(command=command_spec, log_path=workspace.log_path),
            )
            if run_result.exit_code != 0:
                logger.error("Toolchain failed with exit code %d", run_result.exit_code)
                return BuildResult(
                    exit_code=run_result.exit_code,
                    lines=[f"[Error] toolchain exited with code {run_result.exit_code}."],
                    workspace_root=workspace.root,
                )

            harvest = harvest_artifact(
                output_dir=workspace.output_dir,
                destination=request.output_path,
                project_token=settings.workspace.project_token,
            )
            if not harvest.harvested:
                if settings.policy.strict_harvest:
                    return BuildResult(
                        exit_code=int(ExitCode.ARTIFACT_NOT_FOUND),
                        lines=["[Error] toolchain produced no matching artifact."],
                        workspace_root=workspace.root,
                    )
                return BuildResult(
                    exit_code=int(ExitCode.SUCCESS),
                    lines=["[Warning] toolchain produced no matching artifact."],
                    workspace_root=workspace.root,
                )

            return BuildResult(
                exit_code=int(ExitCode.SUCCESS),
                lines=[f"Converted {request.input_path} -> {request.output_path}"],
                artifact_path=request.output_path,
                workspace_root=workspace.root,
            )
