"""Resource schema registry.

The registry is built once at start-up and handed to whoever needs it (the
Flask app keeps it in ``app.config["SCHEMA_REGISTRY"]``, the CLI builds its
own). There is no module-level registry.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Optional

from .diagnostics import Diagnostics
from .engine import validate_config
from .exceptions import SchemaMisconfigurationError, UnknownResourceTypeError
from .schema import ResourceSchema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Resource type name -> ResourceSchema, in registration order."""

    def __init__(self, schemas: Iterable[ResourceSchema] = ()):
        self._schemas: dict[str, ResourceSchema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: ResourceSchema) -> None:
        """Add a schema.

        Raises:
            SchemaMisconfigurationError: If the value is not a ResourceSchema or the type is already registered
        """
        if not isinstance(schema, ResourceSchema):
            raise SchemaMisconfigurationError(f"ResourceSchema expected, got {type(schema).__name__}")
        if schema.type_name in self._schemas:
            raise SchemaMisconfigurationError(f"resource type already registered: {schema.type_name}")
        self._schemas[schema.type_name] = schema

    def get(self, type_name: str) -> ResourceSchema:
        """Look up a schema.

        Raises:
            UnknownResourceTypeError: If no schema is registered under ``type_name``
        """
        try:
            return self._schemas[type_name]
        except KeyError:
            raise UnknownResourceTypeError(type_name) from None

    def types(self) -> list[str]:
        return list(self._schemas)

    def validate(self, type_name: str, raw: Any, max_workers: Optional[int] = None) -> Diagnostics:
        return validate_config(self.get(type_name), raw, max_workers=max_workers)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._schemas

    def __iter__(self) -> Iterator[ResourceSchema]:
        return iter(list(self._schemas.values()))

    def __len__(self) -> int:
        return len(self._schemas)


def build_registry(builders: Optional[Iterable[Callable[[], ResourceSchema]]] = None) -> SchemaRegistry:
    """Build every resource schema and register it.

    Schema declarations are checked while they are built, so a misconfigured
    resource fails here, before anything is validated.

    Args:
        builders: Zero-argument callables returning a ResourceSchema
                  (defaults to every resource in ``gworkspace_schema.resources``)

    Raises:
        SchemaMisconfigurationError: If a declaration is invalid or a type is registered twice
    """
    if builders is None:
        from ..resources import RESOURCE_BUILDERS
        builders = RESOURCE_BUILDERS

    registry = SchemaRegistry()
    for builder in builders:
        registry.register(builder())
    logger.info("Registered %d resource schemas", len(registry))
    return registry
