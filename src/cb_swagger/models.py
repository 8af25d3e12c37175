"""Data models for Communibase entity-type metadata.

The administrative API returns camelCase JSON; every model accepts those
keys as aliases and ignores fields this tool does not use (renderHint,
isCore, ...).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CbModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class AllowableValues(_CbModel):
    """Constraint envelope of an attribute: a value list, a regex or a range."""

    value_type: str  # List / RegExp / Range; other kinds are ignored by the mapper
    values: list[Any] | None = None  # List
    match: str | None = None  # RegExp, as a /pattern/flags literal
    min: int | float | None = None  # Range
    max: int | float | None = None  # Range


class AttributeDescriptor(_CbModel):
    """A single field of an entity type."""

    title: str
    type: str  # ObjectId / Array / Date / int / float / string / Mixed / <EntityType>
    items: str | None = None  # element type tag, only for type="Array"
    allowable_values: AllowableValues | None = None
    default_value: Any = None
    is_required: bool = False
    description: str | None = None

    @property
    def has_default(self) -> bool:
        """True when defaultValue was supplied, even as null, 0 or false."""
        return "default_value" in self.model_fields_set


class EntityTypeDescriptor(_CbModel):
    """A named record schema as defined in the administration."""

    title: str
    description: str | None = None
    attributes: list[AttributeDescriptor] = Field(default_factory=list)
    is_resource: bool = False
