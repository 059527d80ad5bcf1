"""Pick one generated artifact from the toolchain output folder."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HarvestResult:
    """Outcome of one harvest attempt."""

    artifact: Path | None
    destination: Path
    candidates: tuple[Path, ...]

    @property
    def harvested(self) -> bool:
        return self.artifact is not None


def find_artifact_candidates(output_dir: Path, project_token: str) -> list[Path]:
    """List top-level files whose name contains the token, case-insensitively.

    Order follows directory enumeration and is not stable across platforms or
    filesystems.
    """

    needle = project_token.lower()
    with os.scandir(output_dir) as entries:
        return [
            Path(entry.path)
            for entry in entries
            if entry.is_file() and needle in entry.name.lower()
        ]


def harvest_artifact(*, output_dir: Path, destination: Path, project_token: str) -> HarvestResult:
    """Copy the first matching artifact to ``destination``.

    Zero matches is not an error: nothing is copied and ``artifact`` is None.
    An existing destination is never overwritten.
    """

    candidates = find_artifact_candidates(output_dir, project_token)
    if not candidates:
        logger.warning("No artifact matching %r found in %s", project_token, output_dir)
        return HarvestResult(artifact=None, destination=destination, candidates=())
    if len(candidates) > 1:
        logger.warning(
            "%d artifacts match %r; taking %s (others: %s)",
            len(candidates),
            project_token,
            candidates[0].name,
            ", ".join(path.name for path in candidates[1:]),
        )

    artifact = candidates[0]
    destination.parent.mkdir(parents=True, exist_ok=True)
    if destination.exists():
        raise FileExistsError(f"Destination already exists: {destination}")
    shutil.copyfile(artifact, destination)
    logger.info("Harvested %s to %s", artifact.name, destination)
    return HarvestResult(artifact=artifact, destination=destination, candidates=tuple(candidates))
