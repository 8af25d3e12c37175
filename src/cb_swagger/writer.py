"""Serialize the generated document and persist it."""

import json
from pathlib import Path
from typing import Any

import click
import yaml

STDOUT = "-"


class _NoAliasDumper(yaml.SafeDumper):
    # Schema nodes are shared between operations; write them out in full
    def ignore_aliases(self, data):
        return True


def detect_output_format(path: Path) -> str:
    """Pick the output format from the file extension: 'yaml' or 'json'."""
    if path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def render_document(doc: dict[str, Any], fmt: str = "json") -> str:
    if fmt == "yaml":
        return yaml.dump(doc, Dumper=_NoAliasDumper, sort_keys=False, allow_unicode=True)
    return json.dumps(doc, indent="\t", ensure_ascii=False) + "\n"


def write_document(doc: dict[str, Any], path: Path, fmt: str = "auto") -> Path | None:
    """Write the document to `path` ('-' for stdout).

    Returns the resolved file path, or None when written to stdout.
    """
    to_stdout = str(path) == STDOUT
    if fmt == "auto":
        fmt = "json" if to_stdout else detect_output_format(path)

    text = render_document(doc, fmt)
    if to_stdout:
        click.echo(text, nl=False)
        return None

    path = path.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
