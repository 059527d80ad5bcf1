"""Subprocess-based runner for the Unity editor command line."""

from __future__ import annotations

import logging
import subprocess

from unics2cpp.build.backend.base import ToolchainRunRequest, ToolchainRunResult
from unics2cpp.build.models import CommandSpec, Workspace
from unics2cpp.config import ToolchainSettings

logger = logging.getLogger(__name__)


class ToolchainLaunchError(RuntimeError):
    """The toolchain process could not be started."""


def build_command_spec(*, settings: ToolchainSettings, workspace: Workspace) -> CommandSpec:
    """Render the fixed invocation template for one workspace."""

    arguments: list[str] = [*settings.launcher_args, *settings.batch_flags]
    if settings.quit_after_run:
        arguments.append("-quit")
    arguments.extend(
        [
            "-projectPath",
            str(workspace.project_dir),
            "-executeMethod",
            settings.execute_method,
            "--BuildTarget",
            settings.build_target,
        ],
    )
    if settings.application_identifier:
        arguments.extend(["--ApplicationIdentifier", settings.application_identifier])
    if settings.scripting_backend:
        arguments.extend(["--ScriptingBackend", settings.scripting_backend])
    arguments.extend(settings.extra_args)
    arguments.extend(["-logFile", str(workspace.log_path)])
    return CommandSpec(executable=settings.executable, arguments=tuple(arguments))


class UnityCliBackend:
    """Run the editor synchronously; there is no timeout and no cancellation."""

    def run(self, request: ToolchainRunRequest) -> ToolchainRunResult:
        argv = request.command.argv
        logger.info("Starting toolchain: %s", subprocess.list2cmdline(argv))
        try:
            completed = subprocess.run(argv, check=False)  # noqa: S603
        except FileNotFoundError as error:
            raise ToolchainLaunchError(
                f"Toolchain executable not found: {request.command.executable}",
            ) from error
        except OSError as error:
            raise ToolchainLaunchError(f"Toolchain failed to start: {error}") from error

        logger.info(
            "Toolchain exited with code %d (log: %s)",
            completed.returncode,
            request.log_path,
        )
        return ToolchainRunResult(exit_code=completed.returncode, log_path=request.log_path)
