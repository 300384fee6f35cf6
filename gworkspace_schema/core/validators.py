"""Attribute validation rules.

The rule set is closed: every rule is one of the ``RuleKind`` variants and is
evaluated by exactly one function in ``_EVALUATORS``. A kind without an
evaluator is refused when this module is imported.

Rules are immutable and keep no state between calls; ``validate()`` only
looks at the value it is given and returns fresh diagnostics.

Usage:
    rule = StringInSlice(["MANAGER", "MEMBER", "OWNER"])
    diagnostics = rule.validate(ValidationContext(), AttributePath.of("role"), AttributeValue.string("ADMIN"))

Bounds and option lists are checked when a rule is created; a bad
declaration raises ``SchemaMisconfigurationError`` instead of producing
diagnostics later.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Sequence, Union

from .diagnostics import Diagnostic, error
from .exceptions import SchemaMisconfigurationError
from .paths import AttributePath
from .values import AttributeValue, ValueKind

SENSITIVE_PLACEHOLDER = "(sensitive value)"


class RuleKind(str, Enum):
    STRING_LEN_BETWEEN = "string_len_between"
    STRING_IN_SLICE = "string_in_slice"
    EXACTLY_ONE_OF = "exactly_one_of"
    STRING_IS_JSON = "string_is_json"


class RuleScope(str, Enum):
    """What a rule receives as its value."""

    ATTRIBUTE = "attribute"  # the attribute's own value
    RECORD = "record"  # the enclosing composite record


@dataclass(frozen=True)
class ValidationContext:
    """Per-call information handed to a rule.

    Attributes:
        resource_type: Resource type being validated (may be empty in ad-hoc checks)
        sensitive: Hide the offending value in diagnostic details
    """

    resource_type: str = ""
    sensitive: bool = False

    def display(self, text: str) -> str:
        return SENSITIVE_PLACEHOLDER if self.sensitive else text

    def for_attribute(self, sensitive: bool) -> "ValidationContext":
        if sensitive == self.sensitive:
            return self
        return ValidationContext(resource_type=self.resource_type, sensitive=sensitive)


class _RuleBase:
    kind: ClassVar[RuleKind]
    scope: ClassVar[RuleScope] = RuleScope.ATTRIBUTE

    def validate(self, context: ValidationContext, path: AttributePath, value: AttributeValue) -> list[Diagnostic]:
        return evaluate(self, context, path, value)  # type: ignore[arg-type]

    def describe(self) -> str:
        raise NotImplementedError

    def markdown_description(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class StringLenBetween(_RuleBase):
    """Length of the string is between ``min`` and ``max`` characters (inclusive)."""

    min: int
    max: int

    kind: ClassVar[RuleKind] = RuleKind.STRING_LEN_BETWEEN

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            bound = getattr(self, name)
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise SchemaMisconfigurationError(f"StringLenBetween {name} must be an int, got {bound!r}")
        if self.min < 0:
            raise SchemaMisconfigurationError(f"StringLenBetween min must not be negative, got {self.min}")
        if self.max < self.min:
            raise SchemaMisconfigurationError(
                f"StringLenBetween max ({self.max}) must not be lower than min ({self.min})"
            )

    def describe(self) -> str:
        return (
            f"Validates that the length of the supplied string is between {self.min} "
            f"and {self.max} characters (inclusive)."
        )

    def markdown_description(self) -> str:
        return f"Length must be between `{self.min}` and `{self.max}` characters (inclusive)."


@dataclass(frozen=True)
class StringInSlice(_RuleBase):
    """String is one of a fixed, ordered list of options (case-sensitive)."""

    options: Sequence[str]

    kind: ClassVar[RuleKind] = RuleKind.STRING_IN_SLICE

    def __post_init__(self) -> None:
        if isinstance(self.options, str):
            raise SchemaMisconfigurationError("StringInSlice options must be a sequence of strings, not a string")
        options = tuple(self.options)
        if not options:
            raise SchemaMisconfigurationError("StringInSlice options must not be empty")
        for option in options:
            if not isinstance(option, str):
                raise SchemaMisconfigurationError(f"StringInSlice option must be a string, got {option!r}")
        if len(set(options)) != len(options):
            raise SchemaMisconfigurationError(f"StringInSlice options contain duplicates: {list(options)}")
        object.__setattr__(self, "options", options)

    def describe(self) -> str:
        return f"Validates that the provided string is one of: {', '.join(self.options)}."

    def markdown_description(self) -> str:
        return "Must be one of: " + ", ".join(f"`{o}`" for o in self.options) + "."


@dataclass(frozen=True)
class ExactlyOneOf(_RuleBase):
    """Exactly one of a group of sibling attributes is set.

    Evaluated against the enclosing record, not a single attribute value.
    """

    attributes: Sequence[str]

    kind: ClassVar[RuleKind] = RuleKind.EXACTLY_ONE_OF
    scope: ClassVar[RuleScope] = RuleScope.RECORD

    def __post_init__(self) -> None:
        if isinstance(self.attributes, str):
            raise SchemaMisconfigurationError("ExactlyOneOf attributes must be a sequence of names, not a string")
        attributes = tuple(self.attributes)
        if len(attributes) < 2:
            raise SchemaMisconfigurationError(f"ExactlyOneOf needs at least two attributes, got {list(attributes)}")
        for name in attributes:
            if not isinstance(name, str) or not name:
                raise SchemaMisconfigurationError(f"ExactlyOneOf attribute names must be non-empty strings: {name!r}")
        if len(set(attributes)) != len(attributes):
            raise SchemaMisconfigurationError(f"ExactlyOneOf attributes contain duplicates: {list(attributes)}")
        object.__setattr__(self, "attributes", attributes)

    def describe(self) -> str:
        return f"Validates that exactly one of {', '.join(self.attributes)} is set in the configuration."

    def markdown_description(self) -> str:
        return "Exactly one of " + ", ".join(f"`{a}`" for a in self.attributes) + " must be set."


@dataclass(frozen=True)
class StringIsJson(_RuleBase):
    """String parses as JSON."""

    kind: ClassVar[RuleKind] = RuleKind.STRING_IS_JSON

    def describe(self) -> str:
        return "Validates that the provided string is valid JSON."

    def markdown_description(self) -> str:
        return "Must be a valid JSON string."


Rule = Union[StringLenBetween, StringInSlice, ExactlyOneOf, StringIsJson]


# ─────────────────────────────────────────────────────────────────────────────
# Evaluation
# ─────────────────────────────────────────────────────────────────────────────
def _type_mismatch(path: AttributePath, expected: ValueKind, value: AttributeValue) -> Diagnostic:
    return error(
        "incorrect attribute value type",
        f"{path} must be a {expected.value}, got {value.kind.value}",
        path,
    )


def _evaluate_len_between(
    rule: StringLenBetween, context: ValidationContext, path: AttributePath, value: AttributeValue
) -> list[Diagnostic]:
    if value.is_null:
        return []
    if value.kind is not ValueKind.STRING:
        return [_type_mismatch(path, ValueKind.STRING, value)]

    text = value.as_string()
    shown = context.display(text)
    diagnostics = []
    if len(text) < rule.min:
        diagnostics.append(error(
            "length of string is not long enough",
            f"length of {path} ({shown}) needs at least {rule.min} characters",
            path,
        ))
    if len(text) > rule.max:
        diagnostics.append(error(
            "length of string is too long",
            f"length of {path} ({shown}) needs at most {rule.max} characters",
            path,
        ))
    return diagnostics


def _evaluate_in_slice(
    rule: StringInSlice, context: ValidationContext, path: AttributePath, value: AttributeValue
) -> list[Diagnostic]:
    if value.is_null:
        return []
    if value.kind is not ValueKind.STRING:
        return [_type_mismatch(path, ValueKind.STRING, value)]

    text = value.as_string()
    if text in rule.options:
        return []
    return [error(
        "string value is not a valid option",
        f"{path} ({context.display(text)}) must be one of [{', '.join(rule.options)}]",
        path,
    )]


def _evaluate_exactly_one_of(
    rule: ExactlyOneOf, context: ValidationContext, path: AttributePath, record: AttributeValue
) -> list[Diagnostic]:
    if record.is_null:
        return []
    if record.kind is not ValueKind.OBJECT:
        return [_type_mismatch(path, ValueKind.OBJECT, record)]

    set_names = [name for name in rule.attributes if not record.field(name).is_null]
    if len(set_names) == 1:
        return []

    group = ", ".join(rule.attributes)
    where = "" if path.is_root else f" in {path}"
    if set_names:
        detail = (
            f"exactly one of [{group}] must be set{where}, "
            f"but {len(set_names)} were set: [{', '.join(set_names)}]"
        )
    else:
        detail = f"exactly one of [{group}] must be set{where}, but none were set (unset: [{group}])"
    return [error("invalid attribute combination", detail, path.attribute(rule.attributes[0]))]


def _evaluate_is_json(
    rule: StringIsJson, context: ValidationContext, path: AttributePath, value: AttributeValue
) -> list[Diagnostic]:
    if value.is_null:
        return []
    if value.kind is not ValueKind.STRING:
        return [_type_mismatch(path, ValueKind.STRING, value)]

    try:
        json.loads(value.as_string())
    except json.JSONDecodeError as exc:
        return [error(
            "string value is not valid JSON",
            f"{path} ({context.display(value.as_string())}) is not valid JSON: {exc.msg}",
            path,
        )]
    return []


_EVALUATORS: dict[RuleKind, Callable[..., list[Diagnostic]]] = {
    RuleKind.STRING_LEN_BETWEEN: _evaluate_len_between,
    RuleKind.STRING_IN_SLICE: _evaluate_in_slice,
    RuleKind.EXACTLY_ONE_OF: _evaluate_exactly_one_of,
    RuleKind.STRING_IS_JSON: _evaluate_is_json,
}

_missing = set(RuleKind) - set(_EVALUATORS)
if _missing:
    raise RuntimeError(f"rule kinds without an evaluator: {sorted(k.value for k in _missing)}")


def evaluate(rule: Rule, context: ValidationContext, path: AttributePath, value: AttributeValue) -> list[Diagnostic]:
    """Run one rule and return its diagnostics.

    Args:
        rule: Rule to run
        context: Call context (resource type, sensitivity)
        path: Path of the value (the record path for record-scoped rules)
        value: Attribute value, or the enclosing record for record-scoped rules

    Returns:
        Fresh list of diagnostics, empty when the value passes
    """
    return _EVALUATORS[rule.kind](rule, context, path, value)


def is_rule(candidate: object) -> bool:
    return isinstance(candidate, (StringLenBetween, StringInSlice, ExactlyOneOf, StringIsJson))
