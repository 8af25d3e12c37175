"""Minimal Communibase REST client for reading entity-type metadata."""

from typing import Any

import httpx
from pydantic import ValidationError

from .config import GeneratorConfig
from .errors import ConfigError, FetchError
from .models import AttributeDescriptor, EntityTypeDescriptor

DEFAULT_TIMEOUT = 30.0

# EntityType itself is a resource of the administration but is not listed
# among the entity types the API returns.
ENTITY_TYPE_META = EntityTypeDescriptor(
    title="EntityType",
    attributes=[AttributeDescriptor(title="_id", type="ObjectId")],
    is_resource=True,
)


class CommunibaseClient:
    """Reads collections through the `<Type>.json/crud` endpoints."""

    def __init__(
        self,
        api_key: str,
        service_url: str,
        transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not api_key:
            raise ConfigError("Missing Communibase API key")
        if not service_url.endswith("/"):
            service_url += "/"
        self.api_key = api_key
        self.service_url = service_url
        self.transport = transport
        self.timeout = timeout

    def get_all(self, object_type: str) -> list[dict[str, Any]]:
        """Return every record of the given type as raw JSON objects."""
        url = f"{self.service_url}{object_type}.json/crud"
        try:
            with httpx.Client(
                headers={"x-api-key": self.api_key},
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = client.get(url)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"GET {url} returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"GET {url} did not return JSON") from e

        if not isinstance(data, list):
            raise FetchError(f"GET {url} returned {type(data).__name__}, expected a list")
        return data


def fetch_entity_types(
    config: GeneratorConfig,
    transport: httpx.BaseTransport | None = None,
) -> list[EntityTypeDescriptor]:
    """Fetch and validate all entity types of the administration."""
    client = CommunibaseClient(config.api_key, config.service_url, transport=transport)
    records = client.get_all("EntityType")

    entity_types = [ENTITY_TYPE_META] if config.include_entity_type_meta else []
    for record in records:
        try:
            entity_types.append(EntityTypeDescriptor.model_validate(record))
        except ValidationError as e:
            title = record.get("title", "?") if isinstance(record, dict) else "?"
            raise FetchError(f"Invalid entity type {title!r}: {e}") from e
    return entity_types
