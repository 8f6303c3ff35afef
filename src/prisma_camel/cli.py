"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from prisma_camel.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENCODING,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from prisma_camel.conversion_run import (
    ConversionRequest,
    ConversionRunError,
    execute_schema_conversion,
    request_from_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="prisma-camel")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Convert Prisma schema files from snake_case to camelCase."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="convert")
@click.argument("schema_file", required=False, type=click.Path(path_type=str))
@click.argument("output_file", required=False, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file naming the schema to convert",
)
@click.option(
    "--encoding",
    required=False,
    default=None,
    help=f"Text encoding of the schema file  [default: {DEFAULT_ENCODING}]",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the converted schema to stdout instead of writing a file.",
)
def convert(
    schema_file: str | None,
    output_file: str | None,
    config_path: str | None,
    encoding: str | None,
    dry_run: bool,
) -> None:
    """Convert SCHEMA_FILE, writing OUTPUT_FILE (defaults to overwriting SCHEMA_FILE)."""
    request = _build_request(schema_file, output_file, config_path, encoding, dry_run)
    if not dry_run:
        click.echo(f"Reading schema file: {request.schema_path}")
        click.echo("Converting snake_case to camelCase...")
        click.echo(f"Writing to: {Path(request.output_path or request.schema_path).resolve()}")
    try:
        outcome = execute_schema_conversion(request)
    except ConversionRunError as exc:
        raise CliError(f"Error: {exc}") from exc

    if dry_run:
        click.echo(outcome.converted_text, nl=False)
        return
    if outcome.changed:
        click.echo("Success! Schema converted successfully!")
    else:
        click.echo("Schema already uses camelCase; nothing to convert.")


def _build_request(
    schema_file: str | None,
    output_file: str | None,
    config_path: str | None,
    encoding: str | None,
    dry_run: bool,
) -> ConversionRequest:
    if config_path is None:
        if schema_file is None:
            raise CliError("Error: provide SCHEMA_FILE or --config.")
        return ConversionRequest(
            schema_path=schema_file,
            output_path=output_file,
            encoding=encoding or DEFAULT_ENCODING,
            dry_run=dry_run,
        )

    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(f"Error: {exc}") from exc
    request = request_from_configuration(configuration, dry_run=dry_run)
    # explicit command line values win over the configuration file
    return ConversionRequest(
        schema_path=schema_file or request.schema_path,
        output_path=output_file or (None if schema_file else request.output_path),
        encoding=encoding or request.encoding,
        dry_run=dry_run,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
