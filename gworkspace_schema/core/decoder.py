"""Map raw operator configuration onto typed records.

Raw configuration is whatever ``yaml.safe_load`` / ``json.loads`` produced:
dicts, lists and scalars. ``decode_config`` walks it alongside a ``Block``,
builds an OBJECT ``AttributeValue`` and reports every shape problem it finds
without stopping at the first one. A value of the wrong kind is reported once
and decoded as null, so rules attached to that attribute skip it instead of
reporting a second time.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .diagnostics import Diagnostics
from .paths import AttributePath
from .schema import Attribute, Block
from .values import AttributeValue, ValueKind, to_python  # noqa: F401  (re-exported)

_NULL = AttributeValue.null()


def decode_config(
    block: Block, raw: Any, path: Optional[AttributePath] = None
) -> tuple[AttributeValue, Diagnostics]:
    """Decode a raw configuration mapping against a block.

    Args:
        block: Block the configuration is declared against
        raw: Mapping of attribute name to plain Python value
        path: Path of the record inside its resource (root by default)

    Returns:
        (record, diagnostics) where record is an OBJECT value, or null when
        ``raw`` is not a mapping at all

    Example:
        >>> record, diagnostics = decode_config(schema.block, {"name": "eng"})
        >>> diagnostics.has_error()
        False
    """
    diagnostics = Diagnostics()
    record = _decode_block(block, raw, path or AttributePath.root(), diagnostics)
    return record, diagnostics


def _type_name(raw: Any) -> str:
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "bool"
    if isinstance(raw, Mapping):
        return "object"
    if isinstance(raw, (list, tuple, set, frozenset)):
        return "list"
    return {int: "number", float: "number", str: "string"}.get(type(raw), type(raw).__name__)


def _mismatch(diagnostics: Diagnostics, path: AttributePath, expected: str, raw: Any) -> AttributeValue:
    diagnostics.add_error(
        "incorrect attribute value type",
        f"{path} must be {expected}, got {_type_name(raw)}",
        path,
    )
    return _NULL


def _decode_block(block: Block, raw: Any, path: AttributePath, diagnostics: Diagnostics) -> AttributeValue:
    if not isinstance(raw, Mapping):
        return _mismatch(diagnostics, path, "an object", raw)

    for key in raw:
        if not isinstance(key, str) or key not in block:
            diagnostics.add_error(
                "unsupported argument",
                f'an argument named "{key}" is not expected here',
                path.attribute(str(key)),
            )

    fields: dict[str, AttributeValue] = {}
    for attribute in block:
        attribute_path = path.attribute(attribute.name)
        raw_value = raw.get(attribute.name)
        if raw_value is None:
            if attribute.required:
                diagnostics.add_error(
                    "missing required argument",
                    f'the argument "{attribute_path}" is required, but no definition was found',
                    attribute_path,
                )
            fields[attribute.name] = _NULL
            continue
        if attribute.computed_only:
            diagnostics.add_error(
                "value for unconfigurable attribute",
                f'can\'t configure a value for "{attribute_path}": its value will be decided '
                "automatically based on the result of applying this configuration",
                attribute_path,
            )
            fields[attribute.name] = _NULL
            continue
        fields[attribute.name] = _decode_attribute(attribute, raw_value, attribute_path, diagnostics)
    return AttributeValue.object(fields)


def _decode_attribute(
    attribute: Attribute, raw: Any, path: AttributePath, diagnostics: Diagnostics
) -> AttributeValue:
    kind = attribute.kind
    if kind.is_primitive:
        return _decode_primitive(kind, raw, path, diagnostics)
    if kind is ValueKind.OBJECT:
        return _decode_block(attribute.nested, raw, path, diagnostics)
    if kind is ValueKind.MAP:
        return _decode_map(attribute, raw, path, diagnostics)
    if kind in (ValueKind.LIST, ValueKind.SET):
        return _decode_sequence(attribute, raw, path, diagnostics)
    raise TypeError(f"unhandled attribute kind: {kind!r}")


def _decode_primitive(kind: ValueKind, raw: Any, path: AttributePath, diagnostics: Diagnostics) -> AttributeValue:
    try:
        if kind is ValueKind.BOOL and isinstance(raw, bool):
            return AttributeValue.boolean(raw)
        if kind is ValueKind.INT64 and not isinstance(raw, bool):
            if isinstance(raw, int):
                return AttributeValue.int64(raw)
            if isinstance(raw, float) and raw.is_integer():
                return AttributeValue.int64(int(raw))
        if kind is ValueKind.FLOAT64 and not isinstance(raw, bool) and isinstance(raw, (int, float)):
            return AttributeValue.float64(raw)
        if kind is ValueKind.STRING and isinstance(raw, str):
            return AttributeValue.string(raw)
    except TypeError as exc:
        diagnostics.add_error("incorrect attribute value type", f"{path}: {exc}", path)
        return _NULL

    expected = {
        ValueKind.BOOL: "a bool",
        ValueKind.INT64: "a whole number",
        ValueKind.FLOAT64: "a number",
        ValueKind.STRING: "a string",
    }[kind]
    return _mismatch(diagnostics, path, expected, raw)


def _decode_element(
    attribute: Attribute, raw: Any, path: AttributePath, diagnostics: Diagnostics
) -> AttributeValue:
    if raw is None:
        diagnostics.add_error(
            "null value in collection",
            f"{path}: elements of {attribute.name} must not be null",
            path,
        )
        return _NULL
    if attribute.nested is not None:
        return _decode_block(attribute.nested, raw, path, diagnostics)
    return _decode_primitive(attribute.element_kind, raw, path, diagnostics)


def _decode_sequence(
    attribute: Attribute, raw: Any, path: AttributePath, diagnostics: Diagnostics
) -> AttributeValue:
    if attribute.kind is ValueKind.SET and isinstance(raw, (set, frozenset)):
        raw = sorted(raw, key=repr)
    if not isinstance(raw, (list, tuple)):
        return _mismatch(diagnostics, path, f"a {attribute.kind.value}", raw)

    elements = [_decode_element(attribute, item, path.index(i), diagnostics) for i, item in enumerate(raw)]
    if attribute.kind is ValueKind.SET:
        return AttributeValue.set(elements)
    return AttributeValue.list(elements)


def _decode_map(attribute: Attribute, raw: Any, path: AttributePath, diagnostics: Diagnostics) -> AttributeValue:
    if not isinstance(raw, Mapping):
        return _mismatch(diagnostics, path, "a map", raw)

    items: dict[str, AttributeValue] = {}
    for key, item in raw.items():
        if not isinstance(key, str):
            diagnostics.add_error(
                "incorrect attribute value type",
                f"{path} keys must be strings, got {_type_name(key)}",
                path,
            )
            continue
        items[key] = _decode_element(attribute, item, path.key(key), diagnostics)
    return AttributeValue.map(items)


def apply_defaults(block: Block, record: AttributeValue) -> AttributeValue:
    """Return a copy of ``record`` where unset optional attributes take their declared default.

    Nested records and collection elements are filled recursively. A null
    record is returned unchanged.
    """
    if record.kind is not ValueKind.OBJECT:
        return record

    fields: dict[str, AttributeValue] = {}
    for attribute in block:
        value = record.field(attribute.name)
        if value.is_null:
            fields[attribute.name] = attribute.default if attribute.default is not None else value
        elif attribute.nested is None:
            fields[attribute.name] = value
        elif attribute.kind is ValueKind.OBJECT:
            fields[attribute.name] = apply_defaults(attribute.nested, value)
        else:
            filled = [apply_defaults(attribute.nested, element) for element in value.elements()]
            if attribute.kind is ValueKind.SET:
                fields[attribute.name] = AttributeValue.set(filled)
            else:
                fields[attribute.name] = AttributeValue.list(filled)
    return AttributeValue.object(fields)
