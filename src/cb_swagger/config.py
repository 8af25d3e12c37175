"""Run configuration, built once by the CLI and passed down explicitly."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .assembler import DEFAULT_DESCRIPTION, DEFAULT_SERVICE_URL, DEFAULT_TITLE
from .mapper import ObjectIdMode

DEFAULT_OUTPUT = Path("swagger.json")


class GeneratorConfig(BaseModel):
    """Everything one generator run needs to know."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    service_url: str = DEFAULT_SERVICE_URL
    output: Path = DEFAULT_OUTPUT  # "-" writes to stdout
    output_format: str = "auto"  # auto / json / yaml
    object_id_mode: ObjectIdMode = ObjectIdMode.REF
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    include_entity_type_meta: bool = True
    strict: bool = False
