"""Deterministic stand-in for the Unity editor used by integration tests.

It accepts the same command line as the real editor, runs the real
``unics2cpp.editor.build_tool.build`` against in-memory PlayerSettings, and
"compiles" each assembly definition into one ``Bulk_<module>_0.cpp`` file.

``UNICS2CPP_STUB_EXIT_CODE`` forces a non-zero exit before anything is built.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from unics2cpp.config import DEFAULT_EXECUTE_METHOD
from unics2cpp.editor.build_tool import (
    INTERMEDIATE_OUTPUT_DIR,
    BuildToolError,
    EditorScene,
    build,
)
from unics2cpp.editor.enums import BuildTarget, BuildTargetGroup, ScriptingImplementation

logger = logging.getLogger(__name__)

EDITOR_FAILURE_EXIT_CODE = 1
GENERICS_UNIT_NAME = "Bulk_Generics_0.cpp"


@dataclass(slots=True)
class RecordingPlayerSettings:
    """PlayerSettings double that records every applied value."""

    strip_engine_code: bool = False
    application_identifiers: dict[BuildTargetGroup, str] = field(default_factory=dict)
    scripting_backends: dict[BuildTargetGroup, ScriptingImplementation] = field(
        default_factory=dict,
    )
    calls: list[tuple[str, BuildTargetGroup, object]] = field(default_factory=list)

    def set_application_identifier(self, target_group: BuildTargetGroup, identifier: str) -> None:
        self.calls.append(("SetApplicationIdentifier", target_group, identifier))
        self.application_identifiers[target_group] = identifier

    def set_scripting_backend(
        self,
        target_group: BuildTargetGroup,
        backend: ScriptingImplementation,
    ) -> None:
        self.calls.append(("SetScriptingBackend", target_group, backend))
        self.scripting_backends[target_group] = backend

    def get_scripting_backend(self, target_group: BuildTargetGroup) -> ScriptingImplementation:
        return self.scripting_backends.get(target_group, ScriptingImplementation.MONO2X)


class StubBuildPipeline:
    """Writes one translation unit per assembly definition into the IL2CPP staging area."""

    def __init__(self, *, project_dir: Path, player_settings: RecordingPlayerSettings) -> None:
        self.project_dir = project_dir
        self.player_settings = player_settings

    def build_player(
        self,
        scenes: Sequence[str],
        location_path_name: str,
        target: BuildTarget,
    ) -> None:
        logger.info(
            "BuildPlayer target=%s location=%s scenes=%s",
            target.name,
            location_path_name,
            list(scenes),
        )
        backend = self.player_settings.get_scripting_backend(BuildTargetGroup.ANDROID)
        if backend is not ScriptingImplementation.IL2CPP:
            logger.info("Scripting backend %s produces no IL2CPP output", backend.name)
            return

        staging_dir = self.project_dir / INTERMEDIATE_OUTPUT_DIR
        staging_dir.mkdir(parents=True, exist_ok=True)
        for module, sources in _collect_modules(self.project_dir / "Assets").items():
            unit = staging_dir / f"Bulk_{module}_0.cpp"
            unit.write_text(render_translation_unit(module, sources), "utf-8")
            logger.info("Generated %s from %d source(s)", unit.name, len(sources))
        (staging_dir / GENERICS_UNIT_NAME).write_text("// generic instantiations\n", "utf-8")


def render_translation_unit(module: str, sources: Sequence[tuple[str, str]]) -> str:
    """Return the stub C++ text generated for one module."""

    parts = [f"// IL2CPP stub output for module {module}\n"]
    for name, text in sources:
        parts.append(f"// source: {name}\n")
        parts.append(text if text.endswith("\n") else f"{text}\n")
    return "".join(parts)


def _collect_modules(assets_dir: Path) -> dict[str, list[tuple[str, str]]]:
    modules: dict[str, list[tuple[str, str]]] = {}
    for descriptor in sorted(assets_dir.rglob("*.asmdef")):
        if "Editor" in descriptor.relative_to(assets_dir).parts:
            continue
        module = json.loads(descriptor.read_text("utf-8"))["name"]
        sources = [
            (path.name, path.read_text("utf-8"))
            for path in sorted(descriptor.parent.glob("*.cs"))
        ]
        if sources:
            modules[module] = sources
    return modules


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="Unity", allow_abbrev=False)
    parser.add_argument("-batchmode", action="store_true")
    parser.add_argument("-nographics", action="store_true")
    parser.add_argument("-quit", action="store_true")
    parser.add_argument("-projectPath", required=True)
    parser.add_argument("-executeMethod", default=None)
    parser.add_argument("-logFile", default=None)
    namespace, _ = parser.parse_known_args(list(argv))
    return namespace


def main(argv: list[str] | None = None) -> int:
    """Run one stub editor session and return its exit code."""

    args = list(sys.argv[1:] if argv is None else argv)
    options = _parse_args(args)
    if options.logFile:
        logging.basicConfig(filename=options.logFile, level=logging.INFO, force=True)

    forced = int(os.getenv("UNICS2CPP_STUB_EXIT_CODE", "0"))
    if forced != 0:
        logger.error("Forced exit code %d", forced)
        return forced

    project_dir = Path(options.projectPath)
    assets_dir = project_dir / "Assets"
    if not assets_dir.is_dir():
        logger.error("Not a Unity project: %s", project_dir)
        return EDITOR_FAILURE_EXIT_CODE
    if options.executeMethod != DEFAULT_EXECUTE_METHOD:
        logger.error("executeMethod class could not be found: %s", options.executeMethod)
        return EDITOR_FAILURE_EXIT_CODE

    player_settings = RecordingPlayerSettings()
    scenes = [
        EditorScene(path=str(path.relative_to(project_dir).as_posix()))
        for path in sorted(assets_dir.rglob("*.unity"))
    ]
    try:
        build(
            args=args,
            project_dir=project_dir,
            player_settings=player_settings,
            pipeline=StubBuildPipeline(project_dir=project_dir, player_settings=player_settings),
            scenes=scenes,
        )
    except (BuildToolError, OSError):
        logger.exception("Build failed")
        return EDITOR_FAILURE_EXIT_CODE
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
