"""Reads and writes schema and request documents.

.yaml/.yml files are read with ``yaml.safe_load``; everything else is
decoded as JSON first, falling back to YAML for other suffixes. JSON text
never goes through YAML, which would read numbers like ``1e5`` as strings.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from service_contract.schema.models import ServiceMeta


class SchemaLoadError(Exception):
    """A schema or request file could not be read or did not match its shape."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


YAML_SUFFIXES = (".yaml", ".yml")


def load_document(file_path: Path) -> Any:
    """Load a JSON or YAML file into plain Python data."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SchemaLoadError(file_path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise SchemaLoadError(file_path, f"cannot be read ({e.strerror or e})") from e

    if file_path.suffix not in YAML_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            if file_path.suffix == ".json":
                raise SchemaLoadError(file_path, f"not valid JSON ({e})") from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(file_path, f"not valid JSON or YAML ({e})") from e


def load_service_meta(file_path: Path) -> ServiceMeta:
    """Load a ServiceMeta from a JSON or YAML schema file."""
    doc = load_document(file_path)
    if not isinstance(doc, dict):
        raise SchemaLoadError(file_path, "schema document must be a mapping")

    try:
        return ServiceMeta.from_dict(doc)
    except ValidationError as e:
        raise SchemaLoadError(file_path, _summarize(e)) from e


def dump_service_meta(meta: ServiceMeta, file_path: Path) -> None:
    """Write a schema as YAML for .yaml/.yml paths, JSON otherwise."""
    if file_path.suffix in YAML_SUFFIXES:
        text = yaml.safe_dump(meta.to_dict(), sort_keys=False, allow_unicode=True)
    else:
        text = meta.to_json() + "\n"
    file_path.write_text(text, encoding="utf-8")


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)

