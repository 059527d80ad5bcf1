"""Validation of the raw ``--input`` / ``--output`` values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from unics2cpp.build.models import ExitCode, WorkRequest


@dataclass(slots=True)
class ArgumentCheckResult:
    """Either a validated request or the exit code of the first failed check."""

    request: WorkRequest | None
    exit_code: ExitCode | None
    error_summary: str | None

    @property
    def is_valid(self) -> bool:
        return self.request is not None


def validate_arguments(  # noqa: PLR0911
    input_value: str | None,
    output_value: str | None,
) -> ArgumentCheckResult:
    """Check input/output arguments in contract order; the first failure wins."""

    if input_value is None:
        return _failure(ExitCode.INPUT_MISSING, "argument '--input <file path>' is not found.")
    if output_value is None:
        return _failure(ExitCode.OUTPUT_MISSING, "argument '--output <file path>' is not found.")
    if not os.path.isabs(input_value):
        return _failure(
            ExitCode.INPUT_NOT_ABSOLUTE,
            f"argument '--input {input_value}' is not absolute path.",
        )
    if not os.path.isabs(output_value):
        return _failure(
            ExitCode.OUTPUT_NOT_ABSOLUTE,
            f"argument '--output {output_value}' is not absolute path.",
        )
    if input_value.casefold() == output_value.casefold():
        return _failure(ExitCode.INPUT_EQUALS_OUTPUT, "argument input and output are same.")

    return ArgumentCheckResult(
        request=WorkRequest(input_path=Path(input_value), output_path=Path(output_value)),
        exit_code=None,
        error_summary=None,
    )


def _failure(exit_code: ExitCode, summary: str) -> ArgumentCheckResult:
    return ArgumentCheckResult(request=None, exit_code=exit_code, error_summary=summary)
