"""CLI interface for cyd."""

import sys

import click

from shared.cli import error, handle_errors
from shared.logger import setup_logger

from . import __version__
from .converter import DataConverter
from .exceptions import CydError
from .formats import Format


class ConvertCommand(click.Command):
    """Command whose usage errors print one error line and exit with status 1."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            error(f"usage error: {e.format_message()}")
            raise click.exceptions.Exit(1) from e


@click.command(cls=ConvertCommand)
@click.option(
    "--input",
    "-i",
    "input_format",
    type=click.Choice(Format.names(), case_sensitive=False),
    envvar="CYD_INPUT",
    show_envvar=False,
    required=True,
    metavar="FORMAT",
    help="Format of the input document (json, toml, yaml)",
)
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(Format.names(), case_sensitive=False),
    envvar="CYD_OUTPUT",
    show_envvar=False,
    required=True,
    metavar="FORMAT",
    help="Format of the output document (json, toml, yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="cyd")
@handle_errors
def main(input_format: str, output_format: str, verbose: bool):
    """
    cyd - convert your data between JSON, TOML, and YAML.

    Reads a document on stdin and writes it to stdout in the requested
    format. The formats may also be set with the CYD_INPUT and CYD_OUTPUT
    environment variables.

    Examples:

        \b
        # JSON to YAML
        cyd -i json -o yaml < config.json

        \b
        # TOML to JSON
        cat Cargo.toml | cyd --input toml --output json

        \b
        # Formats from the environment
        CYD_INPUT=yaml CYD_OUTPUT=toml cyd < settings.yaml
    """
    log_level = "DEBUG" if verbose else "WARNING"
    setup_logger("cyd", level=log_level)

    converter = DataConverter()

    try:
        converter.convert_stream(
            sys.stdin.buffer,
            sys.stdout.buffer,
            input_format,
            output_format,
        )
    except CydError as e:
        error(str(e))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
