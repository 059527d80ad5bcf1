from __future__ import annotations

import allure
import pytest

from unics2cpp.editor.arguments import get_argument, get_enum_argument, has_argument, parse_enum
from unics2cpp.editor.enums import BuildTarget, ScriptingImplementation

pytestmark = [
    allure.epic("Editor Build"),
    allure.feature("Argument Lookup"),
]

_ARGS = [
    "-batchmode",
    "-projectPath",
    "/tmp/p",
    "--BuildTarget",
    "Android",
    "--stripEngineCode",
    "--ApplicationIdentifier",
    "com.example.app",
]


def test_get_argument_returns_following_token() -> None:
    assert get_argument(_ARGS, "ApplicationIdentifier") == "com.example.app"


def test_get_argument_key_is_case_insensitive() -> None:
    assert get_argument(_ARGS, "buildtarget") == "Android"


def test_get_argument_absent_key() -> None:
    assert get_argument(_ARGS, "ScriptingBackend") is None


def test_get_argument_key_at_end_has_no_value() -> None:
    assert get_argument(["--Flag"], "Flag") is None


def test_get_argument_takes_next_token_even_if_it_is_a_flag() -> None:
    assert get_argument(_ARGS, "stripEngineCode") == "--ApplicationIdentifier"


def test_get_argument_first_occurrence_wins() -> None:
    assert get_argument(["--Key", "a", "--Key", "b"], "Key") == "a"


def test_has_argument() -> None:
    assert has_argument(_ARGS, "stripEngineCode")
    assert has_argument(_ARGS, "STRIPENGINECODE")
    assert not has_argument(_ARGS, "development")


@pytest.mark.parametrize("token", ["IL2CPP", "il2cpp", " Il2Cpp ", "1"])
def test_parse_enum_accepts_names_and_values(token: str) -> None:
    assert parse_enum(ScriptingImplementation, token) is ScriptingImplementation.IL2CPP


@pytest.mark.parametrize("token", [None, "", "bogus", "99", "IL2CPPX"])
def test_parse_enum_returns_none_on_failure(token: str | None) -> None:
    assert parse_enum(ScriptingImplementation, token) is None


def test_get_enum_argument_uses_type_name_as_key() -> None:
    assert get_enum_argument(_ARGS, BuildTarget) is BuildTarget.ANDROID
    assert get_enum_argument(_ARGS, ScriptingImplementation) is None
