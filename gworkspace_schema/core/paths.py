"""Attribute paths: where a value lives inside a resource record."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Union

from .values import AttributeValue, ValueKind


@dataclass(frozen=True)
class AttributeName:
    name: str

    def render(self, first: bool) -> str:
        return self.name if first else f".{self.name}"


@dataclass(frozen=True)
class ElementIndex:
    """Position of an element in a list or set."""

    index: int

    def render(self, first: bool) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True)
class ElementKey:
    """Key of an entry in a map."""

    key: str

    def render(self, first: bool) -> str:
        return f"[{json.dumps(self.key)}]"


PathStep = Union[AttributeName, ElementIndex, ElementKey]


@dataclass(frozen=True)
class AttributePath:
    """Immutable sequence of steps from the resource root.

    Example:
        >>> str(AttributePath.root().attribute("members").index(0).attribute("role"))
        'members[0].role'
    """

    steps: tuple[PathStep, ...] = ()

    @classmethod
    def root(cls) -> "AttributePath":
        return cls(())

    @classmethod
    def of(cls, *names: str) -> "AttributePath":
        return cls(tuple(AttributeName(n) for n in names))

    def attribute(self, name: str) -> "AttributePath":
        return AttributePath(self.steps + (AttributeName(name),))

    def index(self, index: int) -> "AttributePath":
        return AttributePath(self.steps + (ElementIndex(index),))

    def key(self, key: str) -> "AttributePath":
        return AttributePath(self.steps + (ElementKey(key),))

    @property
    def is_root(self) -> bool:
        return not self.steps

    @property
    def parent(self) -> "AttributePath":
        return AttributePath(self.steps[:-1])

    @property
    def last_name(self) -> str | None:
        """Name of the closest attribute step, if any."""
        for step in reversed(self.steps):
            if isinstance(step, AttributeName):
                return step.name
        return None

    def resolve(self, root: AttributeValue) -> AttributeValue:
        """Read the value at this path.

        Steps that run past a null, a missing key or an out-of-range index
        resolve to null; only the values along the path are inspected.

        Raises:
            TypeError: If a step does not fit the kind of value it is applied to
        """
        current = root
        for step in self.steps:
            if current.is_null:
                return current
            if isinstance(step, AttributeName):
                if current.kind is not ValueKind.OBJECT:
                    raise TypeError(f"cannot read attribute {step.name!r} from {current.kind.value} value")
                current = current.field(step.name)
            elif isinstance(step, ElementIndex):
                current = current.element_at(step.index)
            elif isinstance(step, ElementKey):
                if current.kind is not ValueKind.MAP:
                    raise TypeError(f"cannot read key {step.key!r} from {current.kind.value} value")
                current = current.field(step.key)
            else:
                raise TypeError(f"unknown path step: {step!r}")
        return current

    def __str__(self) -> str:
        if not self.steps:
            return "<root>"
        return "".join(step.render(i == 0) for i, step in enumerate(self.steps))
