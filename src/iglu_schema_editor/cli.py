"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
import yaml

from iglu_schema_editor.catalog_export import write_catalog_workbook
from iglu_schema_editor.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    RegistrySettings,
    load_configuration,
    write_placeholder_configuration,
)
from iglu_schema_editor.editing_session import (
    EditorState,
    IdentityChangeError,
    SchemaNotFoundError,
    connect_registry,
    persist_schema,
    select_schema,
)
from iglu_schema_editor.registry_access import RegistryAccessError, RegistryClient
from iglu_schema_editor.schema_management import SchemaError, to_editable_document

_DOMAIN_ERRORS = (
    ConfigurationError,
    RegistryAccessError,
    SchemaError,
    SchemaNotFoundError,
    IdentityChangeError,
)


class CliError(Exception):
    """Custom CLI error."""


config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON registry configuration file",
)
read_key_option = click.option(
    "--read-key",
    envvar="IGLU_READ_KEY",
    required=False,
    help="API key for listing schemas; overrides registry.read_key",
)
write_key_option = click.option(
    "--write-key",
    envvar="IGLU_WRITE_KEY",
    required=False,
    help="API key for writing schemas; overrides registry.write_key",
)
name_option = click.option("--name", required=True, help="Schema name (self.name)")
version_option = click.option(
    "--version",
    "schema_version",
    required=False,
    help="Schema version; defaults to the newest listed version",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="iglu-schema-editor")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log registry traffic.")
def cli(verbose: bool) -> None:
    """Iglu schema registry editor."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML registry configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML registry configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list")
@config_option
@read_key_option
def list_schemas(config_path: str, read_key: str | None) -> None:
    """List the registry's schemas sorted by name."""
    state = _connect(_load_settings(config_path, read_key=read_key))
    click.echo("\t".join(("Name", "Version", "Description", "Properties")))
    for schema in state.schemas:
        row = (schema.name, schema.version, schema.description or "", str(len(schema.properties)))
        click.echo("\t".join(_list_cell(value) for value in row))


@cli.command(name="show")
@config_option
@name_option
@version_option
@read_key_option
def show_schema(
    config_path: str, name: str, schema_version: str | None, read_key: str | None
) -> None:
    """Print the editable document of one schema."""
    state = _select(_load_settings(config_path, read_key=read_key), name, schema_version)
    click.echo(_render_editable(state), nl=False)


@cli.command(name="export")
@config_option
@name_option
@version_option
@read_key_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the editable YAML document to write",
)
def export_schema(
    config_path: str,
    name: str,
    schema_version: str | None,
    read_key: str | None,
    output_path: str,
) -> None:
    """Write the editable document of one schema to a file for later push."""
    state = _select(_load_settings(config_path, read_key=read_key), name, schema_version)
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(_render_editable(state), encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="push")
@config_option
@write_key_option
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to an edited YAML/JSON editable document",
)
def push_schema(config_path: str, write_key: str | None, input_path: str) -> None:
    """Validate an editable document and write it to the registry."""
    settings = _load_settings(config_path, write_key=write_key)
    try:
        text = Path(input_path).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    document = _parse_editable(text, source=input_path)
    _persist(EditorState.from_settings(settings), settings, document)


@cli.command(name="edit")
@config_option
@name_option
@version_option
@read_key_option
@write_key_option
def edit_schema(
    config_path: str,
    name: str,
    schema_version: str | None,
    read_key: str | None,
    write_key: str | None,
) -> None:
    """Edit one schema in $EDITOR and write the result to the registry."""
    settings = _load_settings(config_path, read_key=read_key, write_key=write_key)
    state = _select(settings, name, schema_version)
    edited = click.edit(_render_editable(state), extension=".yaml")
    if edited is None:
        click.echo("No changes made.")
        return
    document = _parse_editable(edited, source="editor")
    _persist(state, settings, document)


@cli.command(name="catalog")
@config_option
@read_key_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the catalog workbook to write",
)
def catalog(config_path: str, read_key: str | None, output_path: str) -> None:
    """Write the registry's schema list to an Excel workbook."""
    state = _connect(_load_settings(config_path, read_key=read_key))
    try:
        written = write_catalog_workbook(state.schemas, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _load_settings(
    config_path: str, *, read_key: str | None = None, write_key: str | None = None
) -> RegistrySettings:
    try:
        settings = load_configuration(config_path).registry
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    return settings.with_keys(read_key=read_key, write_key=write_key)


def _connect(settings: RegistrySettings) -> EditorState:
    with RegistryClient.from_settings(settings) as client:
        try:
            return connect_registry(EditorState.from_settings(settings), client)
        except _DOMAIN_ERRORS as exc:
            raise CliError(str(exc)) from exc


def _select(settings: RegistrySettings, name: str, version: str | None) -> EditorState:
    state = _connect(settings)
    try:
        return select_schema(state, name, version)
    except SchemaNotFoundError as exc:
        raise CliError(str(exc)) from exc


def _persist(state: EditorState, settings: RegistrySettings, document: Mapping[str, Any]) -> None:
    with RegistryClient.from_settings(settings) as client:
        try:
            _, acknowledgement = persist_schema(state, client, document)
        except _DOMAIN_ERRORS as exc:
            raise CliError(str(exc)) from exc
    click.echo(json.dumps(acknowledgement, indent=2, sort_keys=True))


def _list_cell(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace("\t", "\\t")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _render_editable(state: EditorState) -> str:
    if state.editing is None:
        raise CliError("No schema selected.")
    return yaml.safe_dump(
        to_editable_document(state.editing), sort_keys=False, allow_unicode=True
    )


def _parse_editable(text: str, *, source: str) -> Mapping[str, Any]:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CliError(f"Failed to parse editable document from {source}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise CliError(f"Editable document from {source} must be a mapping.")
    try:
        json.dumps(parsed)
    except (TypeError, ValueError) as exc:
        raise CliError(f"Editable document from {source} is not JSON-compatible: {exc}") from exc
    return parsed


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
