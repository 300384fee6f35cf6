"""Schema and validation exceptions."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .diagnostics import Diagnostics


class SchemaError(Exception):
    """Base exception for all schema operations."""
    pass


class SchemaMisconfigurationError(SchemaError):
    """A schema declaration is invalid (bad rule bounds, unknown siblings, ...).

    Raised while schemas are built or registered, never while validating
    operator input.
    """
    pass


class UnknownResourceTypeError(SchemaError):
    """Resource type is not registered.

    Attributes:
        type_name: Resource type that was looked up
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown resource type: {type_name}")


class ConfigValidationError(SchemaError):
    """Configuration has at least one error diagnostic.

    Attributes:
        diagnostics: Every diagnostic of the validation pass, warnings included
    """

    def __init__(self, diagnostics: "Diagnostics"):
        self.diagnostics = diagnostics
        errors = diagnostics.errors()
        first = f": {errors[0]}" if errors else ""
        super().__init__(f"configuration has {len(errors)} error(s){first}")
