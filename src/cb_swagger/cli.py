"""CLI entry point for cb-swagger."""

from pathlib import Path

import click

from cb_swagger.assembler import DEFAULT_DESCRIPTION, DEFAULT_SERVICE_URL, DEFAULT_TITLE, build_document
from cb_swagger.client import fetch_entity_types
from cb_swagger.config import DEFAULT_OUTPUT, GeneratorConfig
from cb_swagger.errors import CbSwaggerError
from cb_swagger.mapper import ObjectIdMode
from cb_swagger.validator import validate_document
from cb_swagger.writer import write_document


def _info(message: str) -> None:
    # stdout may carry the document itself
    click.echo(message, err=True)


def generate(config: GeneratorConfig) -> Path | None:
    """Full pipeline: fetch entity types -> build document -> validate -> write."""
    _info(f"Fetching entity types from {config.service_url}...")
    entity_types = fetch_entity_types(config)
    resources = sum(1 for e in entity_types if e.is_resource)
    _info(f"Found {len(entity_types)} entity types ({resources} resources).")

    doc = build_document(
        entity_types,
        service_url=config.service_url,
        object_id_mode=config.object_id_mode,
        title=config.title,
        description=config.description,
    )

    errors = validate_document(doc)
    for location, message in errors.items():
        _info(f"  Warning: {location}: {message}")
    if errors and config.strict:
        raise click.ClickException(f"{len(errors)} problems found in the generated document")

    path = write_document(doc, config.output, config.output_format)
    if path is not None:
        _info(f"Created {path}")
    return path


@click.command()
@click.argument("api_key", envvar="COMMUNIBASE_KEY")
@click.argument("output", required=False, default=str(DEFAULT_OUTPUT), type=click.Path(allow_dash=True, path_type=Path))
@click.option("--service-url", default=DEFAULT_SERVICE_URL, envvar="COMMUNIBASE_URL", show_default=True, help="Communibase API base URL.")
@click.option("--object-id", "object_id_mode", default="ref", type=click.Choice([m.value for m in ObjectIdMode]), help="Render ObjectId attributes as a shared $ref or inline.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format; auto picks by file extension.")
@click.option("--title", default=DEFAULT_TITLE, help="Value of info.title.")
@click.option("--description", default=DEFAULT_DESCRIPTION, help="Value of info.description.")
@click.option("--no-meta-entity", is_flag=True, help="Do not add the EntityType resource itself.")
@click.option("--strict", is_flag=True, help="Fail when the generated document has dangling references.")
def main(
    api_key: str,
    output: Path,
    service_url: str,
    object_id_mode: str,
    fmt: str,
    title: str,
    description: str,
    no_meta_entity: bool,
    strict: bool,
):
    """Generate a Swagger 2.0 document from Communibase entity types.

    API_KEY is the Communibase API key (or set COMMUNIBASE_KEY). OUTPUT
    defaults to swagger.json; use '-' for stdout.
    """
    if not api_key:
        raise click.UsageError("Missing Communibase API key")

    config = GeneratorConfig(
        api_key=api_key,
        service_url=service_url,
        output=output,
        output_format=fmt,
        object_id_mode=ObjectIdMode(object_id_mode),
        title=title,
        description=description,
        include_entity_type_meta=not no_meta_entity,
        strict=strict,
    )
    try:
        generate(config)
    except CbSwaggerError as e:
        raise click.ClickException(str(e)) from e
