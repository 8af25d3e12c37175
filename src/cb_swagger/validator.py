"""Structural checks on a generated Swagger 2.0 document."""

from typing import Any, Iterator

REQUIRED_KEYS = ("swagger", "info", "host", "basePath", "schemes", "produces", "paths", "definitions")
DEFINITION_PREFIX = "#/definitions/"


def validate_envelope(doc: dict[str, Any]) -> dict[str, str]:
    """Check the top-level Swagger 2.0 keys.

    Returns dict of {json_pointer: error_message}.
    """
    errors = {}
    for key in REQUIRED_KEYS:
        if key not in doc:
            errors[pointer(key)] = "missing required key"
    if doc.get("swagger") not in (None, "2.0"):
        errors[pointer("swagger")] = f"expected '2.0', got {doc['swagger']!r}"
    info = doc.get("info")
    if isinstance(info, dict):
        for key in ("title", "version"):
            if key not in info:
                errors[pointer("info", key)] = "missing required key"
    return errors


def validate_refs(doc: dict[str, Any]) -> dict[str, str]:
    """Report local $refs pointing at definitions that do not exist.

    Unknown attribute types are emitted as references to an entity type of
    the same name, so a typo or a deleted entity type shows up here.
    Default and enum values are data and are not searched.
    Returns dict of {json_pointer: error_message}.
    """
    definitions = doc.get("definitions", {})
    errors = {}
    for location, ref in _iter_refs(doc, ""):
        if not ref.startswith(DEFINITION_PREFIX):
            errors[location] = f"unsupported reference {ref!r}"
            continue
        name = ref[len(DEFINITION_PREFIX):]
        if name not in definitions:
            errors[location] = f"unresolved reference {ref!r}"
    return errors


def validate_document(doc: dict[str, Any]) -> dict[str, str]:
    """Run all structural validations on a document.

    Returns dict of {json_pointer: error_message}; empty when the document is sound.
    """
    errors = {}
    errors.update(validate_envelope(doc))
    errors.update(validate_refs(doc))
    return errors


def pointer(*parts: Any) -> str:
    """JSON pointer (RFC 6901) to the given location."""
    return "".join("/" + str(p).replace("~", "~0").replace("/", "~1") for p in parts)


# Keys whose values are data, not schema
_VALUE_KEYS = ("default", "enum")
# Keys whose values map user-chosen names to schema nodes
_NAMED_MAPS = ("definitions", "properties", "paths")


def _iter_refs(node: Any, location: str, named: bool = False) -> Iterator[tuple[str, str]]:
    if isinstance(node, dict):
        for key, value in node.items():
            child = location + pointer(key)
            if named:
                yield from _iter_refs(value, child)
            elif key in _VALUE_KEYS:
                continue
            elif key == "$ref" and isinstance(value, str):
                yield location, value
            else:
                yield from _iter_refs(value, child, named=key in _NAMED_MAPS)
    elif isinstance(node, list):
        for i, value in enumerate(node):
            yield from _iter_refs(value, location + pointer(i))
