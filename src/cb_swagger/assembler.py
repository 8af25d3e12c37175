"""Entity assembler: entity types -> Swagger 2.0 definitions, paths and envelope.

Everything here is a pure function of its input; fetching the entity types
and writing the document happen elsewhere.
"""

from typing import Any, Iterable
from urllib.parse import urlparse

from .mapper import ObjectIdMode, definition_ref, map_attribute, object_id_schema
from .models import AttributeDescriptor, EntityTypeDescriptor

DEFAULT_SERVICE_URL = "https://api.communibase.nl/0.1/"
DEFAULT_TITLE = "Communibase API"
DEFAULT_DESCRIPTION = "A RESTful API for Communibase administration"

_ID_ATTRIBUTE = AttributeDescriptor(title="_id", type="ObjectId")
_TOKEN_PARAM = {"name": "token", "in": "query", "type": "string", "required": True}


def build_definition(entity: EntityTypeDescriptor, object_id_mode: ObjectIdMode = ObjectIdMode.REF) -> dict[str, Any]:
    """Build the object schema of a single entity type.

    `_id` is always present; resources also get the server-maintained
    `updatedAt` / `updatedBy` fields. A later attribute with the same title
    replaces an earlier one. `required` is left out when nothing is required.
    """
    properties: dict[str, Any] = {"_id": map_attribute(_ID_ATTRIBUTE, object_id_mode)}
    if entity.is_resource:
        properties["updatedAt"] = {"type": "string", "format": "date-time"}
        properties["updatedBy"] = {"type": "string"}

    required: list[str] = []
    for attr in entity.attributes:
        properties[attr.title] = map_attribute(attr, object_id_mode)
        if attr.is_required and attr.title not in required:
            required.append(attr.title)

    definition: dict[str, Any] = {"type": "object"}
    if entity.description:
        definition["description"] = entity.description
    definition["properties"] = properties
    if required:
        definition["required"] = required
    return definition


def build_paths(entity: EntityTypeDescriptor) -> dict[str, Any]:
    """Build the CRUD and search operations of a resource entity type."""
    title = entity.title

    def ref():
        return definition_ref(title)

    def ref_list():
        return {"type": "array", "items": definition_ref(title)}

    return {
        f"/{title}.json/crud": {
            "get": _operation(f'Returns a list of "{title}"', ref_list()),
            "post": _operation(
                f'Creates a new "{title}". Returns the "{title}" with ID and any '
                "server-side modifications and validations",
                ref(),
            ),
        },
        f"/{title}.json/crud/{{id}}": {
            "get": _operation(f'Get a "{title}"', ref()),
            "put": _operation(
                f'Update an existing "{title}". Returns the "{title}" with any server-side modifications.',
                ref(),
            ),
            "delete": _operation(
                f'Removes a "{title}". Response is a JSON object, containing a property "success" '
                "with value true in case of a successful delete",
                {"type": "object", "properties": {"success": {"type": "boolean"}}},
                with_token=False,
            ),
        },
        f"/{title}.json/search": {
            "post": _operation(
                f'Search is just like regular "/{title}.json/crud" GET operations, but may POST a '
                f'more complex query. Returns a list of "{title}"',
                ref_list(),
                with_token=False,
            ),
        },
    }


def _operation(description: str, schema: dict[str, Any], with_token: bool = True) -> dict[str, Any]:
    operation: dict[str, Any] = {"description": description}
    if with_token:
        operation["parameters"] = [dict(_TOKEN_PARAM)]
    operation["responses"] = {"200": {"description": "OK", "schema": schema}}
    return operation


def build_document(
    entities: Iterable[EntityTypeDescriptor],
    service_url: str = DEFAULT_SERVICE_URL,
    object_id_mode: ObjectIdMode = ObjectIdMode.REF,
    title: str = DEFAULT_TITLE,
    description: str = DEFAULT_DESCRIPTION,
) -> dict[str, Any]:
    """Assemble the full Swagger 2.0 document for the given entity types."""
    definitions: dict[str, Any] = {"ObjectId": object_id_schema()}
    paths: dict[str, Any] = {}
    for entity in entities:
        if entity.is_resource:
            paths.update(build_paths(entity))
        definitions[entity.title] = build_definition(entity, object_id_mode)

    url = urlparse(service_url)
    base_path = url.path or "/"

    return {
        "swagger": "2.0",
        "info": {
            "version": base_path.replace("/", ""),
            "title": title,
            "description": description,
        },
        "host": url.netloc,
        "basePath": base_path,
        "tags": [],
        "schemes": [url.scheme],
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "securityDefinitions": {
            "token_in_query": {"type": "apiKey", "name": "token", "in": "query"},
        },
        "paths": paths,
        "definitions": definitions,
    }
