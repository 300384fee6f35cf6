"""Declarations shared by several resources."""
from __future__ import annotations

from ..core.schema import String

TYPE_PREFIX = "googleworkspace_"


def resource_id(description: str = "The ID of this resource.") -> String:
    """Computed ``id`` attribute every resource carries."""
    return String("id", description, computed=True)


def scope_note(scope: str) -> str:
    return f"Resides under the `https://www.googleapis.com/auth/{scope}` client scope."
