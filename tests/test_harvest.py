from __future__ import annotations

from pathlib import Path

import allure
import pytest

from unics2cpp.build.harvest import find_artifact_candidates, harvest_artifact

pytestmark = [
    allure.epic("Build Orchestration"),
    allure.feature("Artifact Harvest"),
]


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path


def test_only_token_matching_files_are_eligible(output_dir: Path, tmp_path: Path) -> None:
    (output_dir / "Foo_UniCs2Cpp.cpp").write_text("foo", "utf-8")
    (output_dir / "Bar.cpp").write_text("bar", "utf-8")
    destination = tmp_path / "dest" / "out.cpp"

    result = harvest_artifact(
        output_dir=output_dir,
        destination=destination,
        project_token="UniCs2Cpp",
    )

    assert result.artifact == output_dir / "Foo_UniCs2Cpp.cpp"
    assert result.candidates == (output_dir / "Foo_UniCs2Cpp.cpp",)
    assert destination.read_text("utf-8") == "foo"


def test_match_is_case_insensitive_and_skips_directories(output_dir: Path) -> None:
    (output_dir / "bulk_unics2cpp_0.CPP").write_text("x", "utf-8")
    (output_dir / "UniCs2Cpp_dir").mkdir()

    candidates = find_artifact_candidates(output_dir, "UniCs2Cpp")

    assert candidates == [output_dir / "bulk_unics2cpp_0.CPP"]


def test_search_is_not_recursive(output_dir: Path) -> None:
    (output_dir / "nested").mkdir()
    (output_dir / "nested" / "UniCs2Cpp.cpp").write_text("x", "utf-8")

    assert find_artifact_candidates(output_dir, "UniCs2Cpp") == []


def test_multiple_matches_pick_one_and_warn(output_dir: Path, tmp_path: Path, caplog) -> None:
    (output_dir / "A_UniCs2Cpp.cpp").write_text("a", "utf-8")
    (output_dir / "B_UniCs2Cpp.cpp").write_text("b", "utf-8")
    destination = tmp_path / "out.cpp"

    result = harvest_artifact(
        output_dir=output_dir,
        destination=destination,
        project_token="UniCs2Cpp",
    )

    assert len(result.candidates) == 2
    assert result.artifact in result.candidates
    assert destination.read_text("utf-8") == result.artifact.read_text("utf-8")
    assert "2 artifacts match" in caplog.text


def test_zero_matches_is_a_quiet_no_op(output_dir: Path, tmp_path: Path, caplog) -> None:
    (output_dir / "Bar.cpp").write_text("bar", "utf-8")
    destination = tmp_path / "dest" / "out.cpp"

    result = harvest_artifact(
        output_dir=output_dir,
        destination=destination,
        project_token="UniCs2Cpp",
    )

    assert not result.harvested
    assert not destination.exists()
    assert not destination.parent.exists()
    assert "No artifact matching" in caplog.text


def test_existing_destination_is_not_overwritten(output_dir: Path, tmp_path: Path) -> None:
    (output_dir / "UniCs2Cpp.cpp").write_text("new", "utf-8")
    destination = tmp_path / "out.cpp"
    destination.write_text("old", "utf-8")

    with pytest.raises(FileExistsError):
        harvest_artifact(output_dir=output_dir, destination=destination, project_token="UniCs2Cpp")

    assert destination.read_text("utf-8") == "old"


def test_missing_output_directory_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        harvest_artifact(
            output_dir=tmp_path / "missing",
            destination=tmp_path / "out.cpp",
            project_token="UniCs2Cpp",
        )
