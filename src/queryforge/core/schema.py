"""
Class schemas - ordered field lists for data classes.

A schema file is YAML in either of two shapes:

    classes:
      GameScore:
        fields:
          objectId: String
          score: Number

or a schema export with a "results" list of {className, fields} entries.
Field order in the file is the order shown to the user.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..errors import SchemaError

logger = logging.getLogger(__name__)


@dataclass
class ClassSchema:
    """A data class and its fields (name -> type), in declaration order."""
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self.fields.keys())


class SchemaProvider(ABC):
    """Source of class schemas."""

    @abstractmethod
    def get_schema(self, class_name: str) -> ClassSchema:
        """
        Get the schema of a class.

        Raises:
            SchemaError: If the class is unknown
        """
        pass

    @abstractmethod
    def class_names(self) -> List[str]:
        pass


class YamlSchemaProvider(SchemaProvider):
    """
    Loads class schemas from a YAML file, once, on first access.

    Usage:
        provider = YamlSchemaProvider(settings.schema_path)
        schema = provider.get_schema("GameScore")
        schema.field_names  # ("objectId", "score", ...)
    """

    def __init__(self, schema_path: Path):
        self.schema_path = Path(schema_path)
        self._cache: Optional[Dict[str, ClassSchema]] = None

    def _load(self) -> Dict[str, ClassSchema]:
        if self._cache is not None:
            return self._cache

        if not self.schema_path.exists():
            raise SchemaError(f"Schema file does not exist: {self.schema_path}")

        try:
            with open(self.schema_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            logger.error(f"Error loading schema file {self.schema_path}: {e}")
            raise SchemaError(f"Could not read schema file {self.schema_path}: {e}") from e

        self._cache = self._parse(data or {})
        logger.info(f"Loaded {len(self._cache)} class schemas from {self.schema_path}")
        return self._cache

    def _parse(self, data) -> Dict[str, ClassSchema]:
        if not isinstance(data, dict):
            raise SchemaError(f"Schema file must contain a mapping: {self.schema_path}")

        schemas: Dict[str, ClassSchema] = {}

        classes = data.get("classes") or {}
        if not isinstance(classes, dict):
            raise SchemaError(f"'classes' must be a mapping of class name to body in {self.schema_path}")
        for name, body in classes.items():
            schemas[name] = ClassSchema(name=name, fields=self._parse_fields(name, body))

        # Schema export format
        results = data.get("results") or []
        if not isinstance(results, list):
            raise SchemaError(f"'results' must be a list in {self.schema_path}")
        for entry in results:
            if not isinstance(entry, dict):
                raise SchemaError(f"Schema entry is not a mapping in {self.schema_path}: {entry!r}")
            name = entry.get("className")
            if not name:
                raise SchemaError(f"Schema entry without className in {self.schema_path}")
            schemas[name] = ClassSchema(name=name, fields=self._parse_fields(name, entry))

        return schemas

    def _parse_fields(self, class_name: str, body) -> Dict[str, str]:
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise SchemaError(f"Body of class '{class_name}' must be a mapping")

        fields = body.get("fields") or {}
        if isinstance(fields, list):
            # Bare list of field names
            return {str(name): "" for name in fields}
        if not isinstance(fields, dict):
            raise SchemaError(f"Invalid fields for class '{class_name}'")

        parsed = {}
        for name, spec in fields.items():
            # Export format nests the type: {"type": "String"}
            if isinstance(spec, dict):
                spec = spec.get("type", "")
            parsed[str(name)] = "" if spec is None else str(spec)
        return parsed

    def get_schema(self, class_name: str) -> ClassSchema:
        schemas = self._load()
        if class_name not in schemas:
            raise SchemaError(f"Unknown class: {class_name}")
        return schemas[class_name]

    def class_names(self) -> List[str]:
        return list(self._load().keys())
