"""Validation engine.

Walks a typed record alongside its schema and runs every rule bound to it.
For each record instance the record-scoped rules (exactly-one-of groups) run
first, then attributes in declaration order; nested records and collection
elements are visited in element order. The resulting diagnostics are
therefore stable for a given schema and record.

With ``max_workers > 1`` the top-level attributes are checked on a thread
pool. Each attribute collects into its own list and the lists are merged in
declaration order, so the output is identical to a sequential pass.

Usage:
    diagnostics = validate_config(schema, {"name": "eng", "parent_org_unit_path": "/"})
    warnings = ensure_valid(diagnostics)   # raises ConfigValidationError on any error
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from .decoder import decode_config
from .diagnostics import Diagnostic, Diagnostics, error
from .exceptions import ConfigValidationError
from .paths import AttributePath
from .schema import Attribute, Block, ResourceSchema
from .validators import ValidationContext, evaluate
from .values import AttributeValue, ValueKind


def validate_record(
    schema: ResourceSchema, record: AttributeValue, max_workers: Optional[int] = None
) -> Diagnostics:
    """Run every rule of ``schema`` against an already decoded record.

    Args:
        schema: Resource schema the record belongs to
        record: OBJECT value (a null record yields no diagnostics)
        max_workers: Thread pool size for top-level attributes; None or 1 runs sequentially

    Returns:
        Diagnostics in record-rule, then declaration order
    """
    context = ValidationContext(resource_type=schema.type_name)
    root = AttributePath.root()
    diagnostics = Diagnostics()
    if record.is_null:
        return diagnostics
    if record.kind is not ValueKind.OBJECT:
        diagnostics.append(_kind_mismatch(root, "an object", record))
        return diagnostics

    block = schema.block
    for rule in block.validators:
        diagnostics.extend(evaluate(rule, context, root, record))

    if max_workers is not None and max_workers > 1 and len(block) > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="validate") as pool:
            futures = [pool.submit(_validate_attribute, a, context, root, record) for a in block]
            for future in futures:
                diagnostics.extend(future.result())
    else:
        for attribute in block:
            diagnostics.extend(_validate_attribute(attribute, context, root, record))
    return diagnostics


def validate_config(schema: ResourceSchema, raw: Any, max_workers: Optional[int] = None) -> Diagnostics:
    """Decode raw configuration and validate it.

    Decoding diagnostics come first, followed by rule diagnostics. Neither
    step stops early, so one call reports every problem.
    """
    record, diagnostics = decode_config(schema.block, raw)
    diagnostics.extend(validate_record(schema, record, max_workers=max_workers))
    return diagnostics


def ensure_valid(diagnostics: Diagnostics) -> list[Diagnostic]:
    """Abort gate: raise if any diagnostic is an error.

    Returns:
        The warnings, for the caller to surface

    Raises:
        ConfigValidationError: If at least one error diagnostic exists
    """
    if diagnostics.has_error():
        raise ConfigValidationError(diagnostics)
    return diagnostics.warnings()


def _kind_mismatch(path: AttributePath, expected: str, value: AttributeValue) -> Diagnostic:
    return error("incorrect attribute value type", f"{path} must be {expected}, got {value.kind.value}", path)


def _validate_block(
    block: Block, context: ValidationContext, path: AttributePath, record: AttributeValue
) -> list[Diagnostic]:
    if record.is_null:
        return []
    if record.kind is not ValueKind.OBJECT:
        return [_kind_mismatch(path, "an object", record)]

    found: list[Diagnostic] = []
    for rule in block.validators:
        found.extend(evaluate(rule, context, path, record))
    for attribute in block:
        found.extend(_validate_attribute(attribute, context, path, record))
    return found


def _validate_attribute(
    attribute: Attribute, context: ValidationContext, parent: AttributePath, record: AttributeValue
) -> list[Diagnostic]:
    path = parent.attribute(attribute.name)
    value = record.field(attribute.name)
    if value.is_null:
        return []

    context = context.for_attribute(context.sensitive or attribute.sensitive)
    kind = value.kind

    if attribute.nested is not None:
        if attribute.kind is ValueKind.OBJECT:
            return _validate_block(attribute.nested, context, path, value)
        if kind not in (ValueKind.LIST, ValueKind.SET):
            return [_kind_mismatch(path, f"a {attribute.kind.value}", value)]
        found: list[Diagnostic] = []
        for i, element in value.indexed_elements():
            found.extend(_validate_block(attribute.nested, context, path.index(i), element))
        return found

    rules = attribute.attribute_rules()
    if not rules:
        return []
    if not attribute.kind.is_collection:
        found = []
        for rule in rules:
            found.extend(evaluate(rule, context, path, value))
        return found

    if kind in (ValueKind.LIST, ValueKind.SET):
        entries = [(path.index(i), element) for i, element in value.indexed_elements()]
    elif kind is ValueKind.MAP:
        entries = [(path.key(key), element) for key, element in value.items()]
    else:
        return [_kind_mismatch(path, f"a {attribute.kind.value}", value)]

    found = []
    for element_path, element in entries:
        for rule in rules:
            found.extend(evaluate(rule, context, element_path, element))
    return found
