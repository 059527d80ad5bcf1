"""CLI entrypoint for unics2cpp."""

import logging

import rich_click as click

from unics2cpp import __version__
from unics2cpp.build.backend import ToolchainLaunchError
from unics2cpp.build.controllers import BuildCliController, BuildCommand

click.rich_click.USE_MARKDOWN = True
BUILD_CONTROLLER = BuildCliController()


@click.command(context_settings={"help_option_names": ["-?", "-h", "--help"]})
@click.version_option(version=__version__, prog_name="unics2cpp")
@click.option(
    "-i",
    "--input",
    "input_path",
    default=None,
    help="Absolute path of the C# source file to convert.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    default=None,
    help="Absolute path where the generated C++ file is written.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help=(
        "Fail with exit code 40 when the input is not staged and 50 when no artifact "
        "is harvested. Also enabled by UNICS2CPP_STRICT_STAGING / UNICS2CPP_STRICT_HARVEST."
    ),
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each build stage.")
@click.pass_context
def unics2cpp(
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Get the IL2CPP-generated C++ for a Unity C# script.

    Exit codes: **0** success, **11**/**12** missing input/output,
    **21**/**22** non-absolute input/output, **30** input equals output;
    any other code is the Unity editor's own.
    """

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        result = BUILD_CONTROLLER.run(
            BuildCommand(input_path=input_path, output_path=output_path, strict=strict),
        )
    except (ToolchainLaunchError, OSError, ValueError) as error:
        raise click.ClickException(str(error)) from error

    _emit_lines(result.lines, err=result.exit_code != 0)
    ctx.exit(result.exit_code)


def _emit_lines(lines: list[str], *, err: bool = False) -> None:
    for line in lines:
        click.echo(line, err=err)


if __name__ == "__main__":  # pragma: no cover
    unics2cpp()
