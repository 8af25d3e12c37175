"""Attribute mapper: Communibase attribute descriptor -> Swagger 2.0 schema node.

Dispatch is on the attribute type tag:

- ObjectId           -> shared ObjectId definition (or an inline 24-char string)
- Array              -> array whose items are mapped from the `items` tag
- Date               -> date-time string
- int / float        -> integer / number with an optional Range
- JSON primitives    -> passthrough type with optional enum / pattern
- Mixed              -> free-form object
- anything else      -> $ref to the entity type of that name
"""

import re
from enum import Enum
from typing import Any, Callable

from .models import AttributeDescriptor

OBJECT_ID_REF = "#/definitions/ObjectId"
OBJECT_ID_LENGTH = 24

PRIMITIVE_TYPES = ("array", "boolean", "integer", "number", "object", "string")

# /pattern/flags -- exactly one slash on each side, flags are optional
_REGEX_LITERAL = re.compile(r"/(.*)/([a-zA-Z]*)", re.DOTALL)


class ObjectIdMode(str, Enum):
    """How ObjectId attributes are rendered."""

    REF = "ref"
    INLINE = "inline"


def definition_ref(title: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{title}"}


def object_id_schema() -> dict[str, Any]:
    """The bounded-length string every MongoDB ObjectId serializes to."""
    return {"type": "string", "minLength": OBJECT_ID_LENGTH, "maxLength": OBJECT_ID_LENGTH}


def strip_regex_literal(match: str) -> str:
    """Turn '/^[a-z]+$/i' into '^[a-z]+$'; leave anything else untouched."""
    m = _REGEX_LITERAL.fullmatch(match)
    if m:
        return m.group(1)
    return match


def map_attribute(attr: AttributeDescriptor, object_id_mode: ObjectIdMode = ObjectIdMode.REF) -> dict[str, Any]:
    """Map one attribute to its schema node. Never fails."""
    handler = _HANDLERS.get(attr.type)
    if handler is None:
        # Unknown tags are entity types, possibly defined later in the document
        return definition_ref(attr.type)
    return handler(attr, object_id_mode)


def _object_id(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    if mode == ObjectIdMode.INLINE:
        return object_id_schema()
    return {"$ref": OBJECT_ID_REF}


def _array(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    if attr.items:
        items = map_attribute(AttributeDescriptor(title="", type=attr.items), mode)
    else:
        items = {}
    return _with_description({"type": "array", "items": items}, attr)


def _date(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    # Communibase dates and datetimes are both exposed as date-time
    schema = _with_description({"type": "string", "format": "date-time"}, attr)
    return _with_default(schema, attr)


def _numeric(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    schema = {"type": "integer" if attr.type == "int" else "number"}
    schema = _with_description(schema, attr)
    allowed = attr.allowable_values
    if allowed is not None and allowed.value_type == "Range":
        if allowed.min is not None:
            schema["minimum"] = allowed.min
        if allowed.max is not None:
            schema["maximum"] = allowed.max
    return _with_default(schema, attr)


def _primitive(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    schema = _with_description({"type": attr.type}, attr)
    allowed = attr.allowable_values
    if allowed is not None:
        if allowed.value_type == "List" and allowed.values:
            schema["enum"] = list(allowed.values)
        elif allowed.value_type == "RegExp" and allowed.match:
            schema["pattern"] = strip_regex_literal(allowed.match)
    return _with_default(schema, attr)


def _mixed(attr: AttributeDescriptor, mode: ObjectIdMode) -> dict[str, Any]:
    schema = {"type": "object", "title": attr.title}
    schema = _with_description(schema, attr)
    schema["additionalProperties"] = True
    return schema


def _with_description(schema: dict[str, Any], attr: AttributeDescriptor) -> dict[str, Any]:
    if attr.description:
        return {**schema, "description": attr.description}
    return schema


def _with_default(schema: dict[str, Any], attr: AttributeDescriptor) -> dict[str, Any]:
    if attr.has_default:
        return {**schema, "default": attr.default_value}
    return schema


_HANDLERS: dict[str, Callable[[AttributeDescriptor, ObjectIdMode], dict[str, Any]]] = {
    "ObjectId": _object_id,
    "Array": _array,
    "Date": _date,
    "int": _numeric,
    "float": _numeric,
    "Mixed": _mixed,
    **{name: _primitive for name in PRIMITIVE_TYPES},
}
