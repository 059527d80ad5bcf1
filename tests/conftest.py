"""Shared test fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

import unics2cpp

_STUB_LAUNCHER_ARGS = "-m unics2cpp.build.backend.stub_toolchain"
_ENV_VARS = (
    "UNICS2CPP_UNITY_EXECUTABLE",
    "UNICS2CPP_UNITY_LAUNCHER_ARGS",
    "UNICS2CPP_EXECUTE_METHOD",
    "UNICS2CPP_BUILD_TARGET",
    "UNICS2CPP_APPLICATION_IDENTIFIER",
    "UNICS2CPP_SCRIPTING_BACKEND",
    "UNICS2CPP_EXTRA_ARGS",
    "UNICS2CPP_WORKSPACE_ROOT",
    "UNICS2CPP_HELPER_BINARY",
    "UNICS2CPP_STRICT_STAGING",
    "UNICS2CPP_STRICT_HARVEST",
    "UNICS2CPP_STUB_EXIT_CODE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def helper_binary(tmp_path: Path) -> Path:
    path = tmp_path / "helper" / "BuildUtils.dll"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"MZ\x90\x00stub-helper")
    return path


@pytest.fixture()
def stub_toolchain(monkeypatch, tmp_path: Path, helper_binary: Path) -> Path:
    """Point the environment at the in-package stub editor; return the workspace root."""
    workspace_root = tmp_path / "workspaces"
    monkeypatch.setenv("UNICS2CPP_UNITY_EXECUTABLE", sys.executable)
    monkeypatch.setenv("UNICS2CPP_UNITY_LAUNCHER_ARGS", _STUB_LAUNCHER_ARGS)
    monkeypatch.setenv("UNICS2CPP_WORKSPACE_ROOT", str(workspace_root))
    monkeypatch.setenv("UNICS2CPP_HELPER_BINARY", str(helper_binary))
    package_root = str(Path(unics2cpp.__file__).resolve().parent.parent)
    existing = os.environ.get("PYTHONPATH", "")
    monkeypatch.setenv("PYTHONPATH", os.pathsep.join(filter(None, [package_root, existing])))
    return workspace_root


@pytest.fixture()
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "src" / "Hello.cs"
    path.parent.mkdir(parents=True)
    path.write_text("public class Hello { public int Answer() => 42; }\n", "utf-8")
    return path
