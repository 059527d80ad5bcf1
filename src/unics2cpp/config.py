"""Runtime configuration for workspace staging and toolchain invocation."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_UNITY_EXECUTABLE = r"C:\Program Files\Unity\Hub\Editor\2018.1.9f1\Editor\Unity.exe"
DEFAULT_EXECUTE_METHOD = "BuildUtils.BuildTool.Build"
DEFAULT_HELPER_BINARY = Path(__file__).resolve().parent / "BuildUtils.dll"


@dataclass(slots=True)
class ToolchainSettings:
    """Fixed invocation template for the external Unity editor."""

    executable: str = DEFAULT_UNITY_EXECUTABLE
    launcher_args: tuple[str, ...] = ()
    batch_flags: tuple[str, ...] = ("-batchmode", "-nographics")
    quit_after_run: bool = True
    execute_method: str = DEFAULT_EXECUTE_METHOD
    build_target: str = "Android"
    application_identifier: str = "com.yol.unics2cpp"
    scripting_backend: str = "IL2CPP"
    extra_args: tuple[str, ...] = ()


@dataclass(slots=True)
class WorkspaceSettings:
    """Where workspaces are allocated and what gets copied into them."""

    project_token: str = "UniCs2Cpp"
    temp_root: Path | None = None
    helper_binary_path: Path = DEFAULT_HELPER_BINARY


@dataclass(slots=True)
class PolicySettings:
    """Whether lenient no-op paths are turned into failures."""

    strict_staging: bool = False
    strict_harvest: bool = False


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    toolchain: ToolchainSettings = field(default_factory=ToolchainSettings)
    workspace: WorkspaceSettings = field(default_factory=WorkspaceSettings)
    policy: PolicySettings = field(default_factory=PolicySettings)

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment, falling back to the stock Unity install."""

        temp_root = os.getenv("UNICS2CPP_WORKSPACE_ROOT", "").strip()
        return cls(
            toolchain=ToolchainSettings(
                executable=os.getenv("UNICS2CPP_UNITY_EXECUTABLE", DEFAULT_UNITY_EXECUTABLE),
                launcher_args=_env_args("UNICS2CPP_UNITY_LAUNCHER_ARGS"),
                execute_method=os.getenv("UNICS2CPP_EXECUTE_METHOD", DEFAULT_EXECUTE_METHOD),
                build_target=os.getenv("UNICS2CPP_BUILD_TARGET", "Android"),
                application_identifier=os.getenv(
                    "UNICS2CPP_APPLICATION_IDENTIFIER",
                    "com.yol.unics2cpp",
                ),
                scripting_backend=os.getenv("UNICS2CPP_SCRIPTING_BACKEND", "IL2CPP"),
                extra_args=_env_args("UNICS2CPP_EXTRA_ARGS"),
            ),
            workspace=WorkspaceSettings(
                temp_root=Path(temp_root) if temp_root else None,
                helper_binary_path=Path(
                    os.getenv("UNICS2CPP_HELPER_BINARY", str(DEFAULT_HELPER_BINARY)),
                ),
            ),
            policy=PolicySettings(
                strict_staging=_env_bool("UNICS2CPP_STRICT_STAGING", default=False),
                strict_harvest=_env_bool("UNICS2CPP_STRICT_HARVEST", default=False),
            ),
        )

    def validate(self) -> None:
        """Raise configuration error if the invocation template is unusable."""

        if not self.toolchain.executable.strip():
            raise ValueError("UNICS2CPP_UNITY_EXECUTABLE must not be empty.")
        if not self.toolchain.execute_method.strip():
            raise ValueError("UNICS2CPP_EXECUTE_METHOD must not be empty.")
        if not self.toolchain.build_target.strip():
            raise ValueError("UNICS2CPP_BUILD_TARGET must not be empty.")
        token = self.workspace.project_token
        if not token or any(sep in token for sep in ("/", "\\")):
            raise ValueError(f"Invalid project token: {token!r}")


def _env_args(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return ()
    try:
        return tuple(shlex.split(raw))
    except ValueError as error:
        raise ValueError(f"Invalid argument list for {name}: {raw!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
