"""Subset of the Unity editor enums the build entry point resolves from arguments.

Member values mirror the editor's own numbering so numeric tokens resolve to
the same member Unity would pick.
"""

from __future__ import annotations

from enum import IntEnum


class BuildTarget(IntEnum):
    """Player platform selected with ``--BuildTarget``."""

    STANDALONEOSX = 2
    STANDALONEWINDOWS = 5
    IOS = 9
    ANDROID = 13
    STANDALONEWINDOWS64 = 19
    WEBGL = 20
    WSAPLAYER = 21
    STANDALONELINUX64 = 24


class BuildTargetGroup(IntEnum):
    """Platform category passed as the first argument of per-platform setters."""

    UNKNOWN = 0
    STANDALONE = 1
    IOS = 4
    ANDROID = 7
    WEBGL = 13
    WSA = 14


class ScriptingImplementation(IntEnum):
    """Scripting backend accepted by ``SetScriptingBackend``."""

    MONO2X = 0
    IL2CPP = 1
    WINRTDOTNET = 2
