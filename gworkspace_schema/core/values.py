"""Typed attribute values.

Configuration values and API payloads are both carried as ``AttributeValue``
instances: a closed set of tags (``ValueKind``) with one payload shape per tag.
Anything that is not one of those shapes is refused when the value is built,
so consumers dispatch on ``kind`` alone.

Usage:
    value = AttributeValue.string("alice@example.com")
    value.kind is ValueKind.STRING
    value.as_string()

    record = AttributeValue.object({"name": AttributeValue.string("eng")})
    record.field("name").as_string()
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(str, Enum):
    """Tags of the attribute value union."""

    NULL = "null"
    BOOL = "bool"
    INT64 = "int64"
    FLOAT64 = "float64"
    STRING = "string"
    LIST = "list"
    SET = "set"
    MAP = "map"
    OBJECT = "object"

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_KINDS

    @property
    def is_collection(self) -> bool:
        return self in COLLECTION_KINDS


PRIMITIVE_KINDS = frozenset({ValueKind.BOOL, ValueKind.INT64, ValueKind.FLOAT64, ValueKind.STRING})
COLLECTION_KINDS = frozenset({ValueKind.LIST, ValueKind.SET, ValueKind.MAP})


@dataclass(frozen=True, eq=True)
class AttributeValue:
    """One tagged value.

    Build instances through the classmethod constructors; each one checks the
    payload shape for its tag. Collection payloads are stored as tuples (and
    map/object payloads as tuples of ``(key, value)`` pairs) so values are
    immutable once built.

    A SET built from a sequence keeps ``sources``: for each input position,
    the index of the distinct element it became. It is not part of equality.
    """

    kind: ValueKind
    payload: Any = None
    sources: Optional[tuple[int, ...]] = dataclass_field(default=None, compare=False, repr=False)

    # ─────────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────────
    @classmethod
    def null(cls) -> "AttributeValue":
        return _NULL

    @classmethod
    def boolean(cls, value: bool) -> "AttributeValue":
        if not isinstance(value, bool):
            raise TypeError(f"bool value expected, got {type(value).__name__}")
        return cls(ValueKind.BOOL, value)

    @classmethod
    def int64(cls, value: int) -> "AttributeValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"int value expected, got {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise TypeError(f"int value {value} is outside the 64-bit range")
        return cls(ValueKind.INT64, value)

    @classmethod
    def float64(cls, value: float) -> "AttributeValue":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"float value expected, got {type(value).__name__}")
        return cls(ValueKind.FLOAT64, float(value))

    @classmethod
    def string(cls, value: str) -> "AttributeValue":
        if not isinstance(value, str):
            raise TypeError(f"str value expected, got {type(value).__name__}")
        return cls(ValueKind.STRING, value)

    @classmethod
    def list(cls, elements: Iterable["AttributeValue"]) -> "AttributeValue":
        return cls(ValueKind.LIST, _checked_elements(elements))

    @classmethod
    def set(cls, elements: Iterable["AttributeValue"]) -> "AttributeValue":
        distinct: list[AttributeValue] = []
        sources: list[int] = []
        for element in _checked_elements(elements):
            if element not in distinct:
                distinct.append(element)
            sources.append(distinct.index(element))
        return cls(ValueKind.SET, tuple(distinct), tuple(sources))

    @classmethod
    def map(cls, items: Mapping[str, "AttributeValue"]) -> "AttributeValue":
        return cls(ValueKind.MAP, _checked_items(items))

    @classmethod
    def object(cls, fields: Mapping[str, "AttributeValue"]) -> "AttributeValue":
        return cls(ValueKind.OBJECT, _checked_items(fields))

    @classmethod
    def of(cls, value: Any) -> "AttributeValue":
        """Infer the tag from a plain Python value.

        Lists and tuples become LIST, sets become SET and dicts become MAP;
        records are only produced by the schema-aware decoder.

        Raises:
            TypeError: If the value has no matching tag
        """
        if isinstance(value, AttributeValue):
            return value
        if value is None:
            return _NULL
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.int64(value)
        if isinstance(value, float):
            return cls.float64(value)
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, (list, tuple)):
            return cls.list(cls.of(v) for v in value)
        if isinstance(value, (set, frozenset)):
            return cls.set(cls.of(v) for v in sorted(value, key=repr))
        if isinstance(value, Mapping):
            return cls.map({k: cls.of(v) for k, v in value.items()})
        raise TypeError(f"unsupported attribute value type: {type(value).__name__}")

    # ─────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────
    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def as_bool(self) -> bool:
        return self._expect(ValueKind.BOOL)

    def as_int(self) -> int:
        return self._expect(ValueKind.INT64)

    def as_float(self) -> float:
        return self._expect(ValueKind.FLOAT64)

    def as_string(self) -> str:
        return self._expect(ValueKind.STRING)

    def elements(self) -> tuple["AttributeValue", ...]:
        """Elements of a LIST or SET value, in stored order."""
        if self.kind not in (ValueKind.LIST, ValueKind.SET):
            raise TypeError(f"list or set value expected, got {self.kind.value}")
        return self.payload

    def indexed_elements(self) -> list[tuple[int, "AttributeValue"]]:
        """Elements paired with the input position they were given at.

        For a SET built with duplicates this is the position of each
        element's first occurrence, so paths keep pointing at the input.
        """
        elements = self.elements()
        if self.kind is ValueKind.LIST or self.sources is None:
            return list(enumerate(elements))
        first: dict[int, int] = {}
        for position, index in enumerate(self.sources):
            first.setdefault(index, position)
        return [(first[index], element) for index, element in enumerate(elements)]

    def element_at(self, position: int) -> "AttributeValue":
        """Element given at input position ``position``; null when out of range."""
        elements = self.elements()
        if self.kind is ValueKind.SET and self.sources is not None:
            if not 0 <= position < len(self.sources):
                return _NULL
            return elements[self.sources[position]]
        if not 0 <= position < len(elements):
            return _NULL
        return elements[position]

    def items(self) -> tuple[tuple[str, "AttributeValue"], ...]:
        """Key/value pairs of a MAP or OBJECT value, in stored order."""
        if self.kind not in (ValueKind.MAP, ValueKind.OBJECT):
            raise TypeError(f"map or object value expected, got {self.kind.value}")
        return self.payload

    def field(self, name: str) -> "AttributeValue":
        """Value of one key of a MAP or OBJECT; null when the key is absent."""
        for key, value in self.items():
            if key == name:
                return value
        return _NULL

    def _expect(self, kind: ValueKind) -> Any:
        if self.kind is not kind:
            raise TypeError(f"{kind.value} value expected, got {self.kind.value}")
        return self.payload

    def __str__(self) -> str:
        return render(self)


_NULL = AttributeValue(ValueKind.NULL, None)


def _checked_elements(elements: Iterable[AttributeValue]) -> tuple[AttributeValue, ...]:
    checked = tuple(elements)
    for element in checked:
        if not isinstance(element, AttributeValue):
            raise TypeError(f"AttributeValue element expected, got {type(element).__name__}")
    return checked


def _checked_items(items: Mapping[str, AttributeValue]) -> tuple[tuple[str, AttributeValue], ...]:
    checked = []
    for key, value in items.items():
        if not isinstance(key, str):
            raise TypeError(f"str key expected, got {type(key).__name__}")
        if not isinstance(value, AttributeValue):
            raise TypeError(f"AttributeValue for key {key!r} expected, got {type(value).__name__}")
        checked.append((key, value))
    return tuple(checked)


def render(value: AttributeValue) -> str:
    """Human-readable rendering used in diagnostic details."""
    kind = value.kind
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value.payload else "false"
    if kind in (ValueKind.INT64, ValueKind.FLOAT64, ValueKind.STRING):
        return str(value.payload)
    if kind in (ValueKind.LIST, ValueKind.SET):
        return "[" + ", ".join(render(v) for v in value.payload) + "]"
    if kind in (ValueKind.MAP, ValueKind.OBJECT):
        return "{" + ", ".join(f"{k}: {render(v)}" for k, v in value.payload) + "}"
    raise TypeError(f"unhandled value kind: {kind!r}")


def to_python(value: AttributeValue) -> Any:
    """Convert a typed value back into plain Python data (dicts, lists, scalars)."""
    kind = value.kind
    if kind is ValueKind.NULL:
        return None
    if kind in (ValueKind.BOOL, ValueKind.INT64, ValueKind.FLOAT64, ValueKind.STRING):
        return value.payload
    if kind in (ValueKind.LIST, ValueKind.SET):
        return [to_python(v) for v in value.payload]
    if kind in (ValueKind.MAP, ValueKind.OBJECT):
        return {k: to_python(v) for k, v in value.payload}
    raise TypeError(f"unhandled value kind: {kind!r}")
