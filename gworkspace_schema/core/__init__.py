"""Core Schema & Validation Module

This module holds the attribute validation engine and the schema model it
runs against, independent of Flask and of any remote API client.

Architecture:
    - Pure Python (no Flask, no I/O, no logging in values/rules/engine)
    - Closed value and rule sets with exhaustive dispatch
    - Immutable schemas and rules; only the Diagnostics collector is mutable

Module Structure:
    - values.py      : AttributeValue tagged union and ValueKind
    - paths.py       : AttributePath (``members[0].role``)
    - diagnostics.py : Diagnostic, Severity and the thread-safe collector
    - validators.py  : StringLenBetween, StringInSlice, ExactlyOneOf, StringIsJson
    - schema.py      : Attribute / Block / ResourceSchema declarations
    - decoder.py     : raw configuration -> typed record, defaults
    - engine.py      : validate_record(), validate_config(), ensure_valid()
    - registry.py    : SchemaRegistry and build_registry()
    - exceptions.py  : SchemaError hierarchy

Usage Pattern:
    These modules are NOT auto-imported; import explicitly when needed:
        from gworkspace_schema.core.registry import build_registry
        from gworkspace_schema.core.engine import ensure_valid

        registry = build_registry()
        diagnostics = registry.validate("googleworkspace_group", {"email": "eng@example.com"})
        warnings = ensure_valid(diagnostics)
"""
