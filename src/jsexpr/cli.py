"""Command-line interface for the JSON to S-expression converter."""

import logging
import sys
from pathlib import Path
from typing import IO

import click

from . import DEFAULT_MAX_DEPTH
from . import ParseError
from . import __version__
from . import convert

logger = logging.getLogger(__name__)

PROG_NAME = "json-to-sexpr"

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument(
    "input_file",
    required=False,
    default="-",
    type=click.File("r", encoding="utf-8"),
)
@click.option(
    "-o",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write output to file (default: stdout)",
)
@click.option(
    "--pretty",
    "-p",
    is_flag=True,
    help="Enable pretty printing with indentation (the default layout)",
)
@click.option(
    "--compact", "-c", is_flag=True, help="Render on a single line"
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    envvar="JSEXPR_MAX_DEPTH",
    help="Maximum nesting depth of objects and arrays",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(
    ctx: click.Context,
    input_file: IO[str],
    output: Path | None,
    pretty: bool,
    compact: bool,
    max_depth: int,
    verbose: bool,
) -> int:
    """Convert a JSON document to an S-expression.

    Reads INPUT_FILE, or stdin when it is omitted.

    \b
    Examples:
      json-to-sexpr input.json
      json-to-sexpr -o output.lisp input.json
      cat input.json | json-to-sexpr -p
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if pretty and compact:
        raise click.UsageError("--pretty and --compact are mutually exclusive")

    try:
        json_content = input_file.read()
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: Could not read input: {e}", err=True)
        ctx.exit(1)

    try:
        result = convert(json_content, compact=compact, max_depth=max_depth)
    except ParseError as e:
        click.echo(f"Error: Failed to parse JSON: {e}", err=True)
        ctx.exit(1)

    if output is None:
        click.echo(result, nl=False)
        return 0

    try:
        output.write_text(result, encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: Could not write {output}: {e}", err=True)
        ctx.exit(1)

    logger.debug("Wrote %d characters to %s", len(result), output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Runs the command line and returns its exit status.

    Usage errors (unknown options, unreadable input file, extra
    arguments) exit with status 1 and print usage on stderr.
    """
    try:
        status = cli.main(
            args=argv, prog_name=PROG_NAME, standalone_mode=False
        )
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return status or 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
