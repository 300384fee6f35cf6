"""Resource schema declarations.

A ``ResourceSchema`` is the static shape of one resource type: a root
``Block`` of ``Attribute`` declarations, some of which nest further blocks.
Attributes carry their flags (required / optional / computed), an optional
default and the validation rules bound to them.

Declarations are checked when they are built. Anything the engine could not
evaluate sensibly (a length rule on a boolean, an exactly-one-of group naming
an attribute that does not exist, a default of the wrong kind) raises
``SchemaMisconfigurationError`` right away.

Example:
    ResourceSchema(
        "googleworkspace_org_unit",
        "Organizational unit.",
        Block([
            String("name", "The organizational unit's path name.", required=True),
            String("parent_org_unit_id", optional=True, computed=True,
                   validators=[ExactlyOneOf(["parent_org_unit_id", "parent_org_unit_path"])]),
            String("parent_org_unit_path", optional=True, computed=True,
                   validators=[ExactlyOneOf(["parent_org_unit_id", "parent_org_unit_path"])]),
        ]),
    )
"""
from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from .exceptions import SchemaMisconfigurationError
from .validators import Rule, RuleScope, is_rule
from .values import AttributeValue, ValueKind

_DEFAULT_BUILDERS = {
    ValueKind.BOOL: AttributeValue.boolean,
    ValueKind.INT64: AttributeValue.int64,
    ValueKind.FLOAT64: AttributeValue.float64,
    ValueKind.STRING: AttributeValue.string,
}


class Attribute:
    """Base declaration; use one of the typed subclasses below."""

    kind: ValueKind = ValueKind.NULL
    element_kind: Optional[ValueKind] = None

    def __init__(
        self,
        name: str,
        description: str = "",
        *,
        required: bool = False,
        optional: bool = False,
        computed: bool = False,
        sensitive: bool = False,
        default: Any = None,
        validators: Sequence[Rule] = (),
    ):
        if type(self) is Attribute:
            raise SchemaMisconfigurationError("Attribute is abstract; use String, Bool, ListNested, ...")
        if not isinstance(name, str) or not name:
            raise SchemaMisconfigurationError(f"attribute name must be a non-empty string, got {name!r}")
        self.name = name
        self.description = description
        self.required = required
        self.optional = optional
        self.computed = computed
        self.sensitive = sensitive
        self.validators: tuple[Rule, ...] = tuple(validators)
        self._check_flags()
        self._check_validators()
        self.default: Optional[AttributeValue] = self._build_default(default)

    # ─────────────────────────────────────────────────────────────────────
    # Declaration checks
    # ─────────────────────────────────────────────────────────────────────
    def _check_flags(self) -> None:
        if self.required and (self.optional or self.computed):
            raise SchemaMisconfigurationError(
                f"attribute {self.name!r}: required cannot be combined with optional or computed"
            )
        if not (self.required or self.optional or self.computed):
            raise SchemaMisconfigurationError(
                f"attribute {self.name!r}: must be required, optional or computed"
            )

    def _check_validators(self) -> None:
        for rule in self.validators:
            if not is_rule(rule):
                raise SchemaMisconfigurationError(f"attribute {self.name!r}: not a validation rule: {rule!r}")
            if rule.scope is RuleScope.ATTRIBUTE and self.string_target is not ValueKind.STRING:
                raise SchemaMisconfigurationError(
                    f"attribute {self.name!r}: {type(rule).__name__} needs a string attribute, "
                    f"got {self.type_label()}"
                )
            if rule.scope is RuleScope.RECORD and self.name not in rule.attributes:
                raise SchemaMisconfigurationError(
                    f"attribute {self.name!r}: {type(rule).__name__} declared here must include it, "
                    f"got {list(rule.attributes)}"
                )

    def _build_default(self, default: Any) -> Optional[AttributeValue]:
        if default is None:
            return None
        if self.required or self.computed_only:
            raise SchemaMisconfigurationError(
                f"attribute {self.name!r}: only optional attributes can declare a default"
            )
        builder = _DEFAULT_BUILDERS.get(self.kind)
        if builder is None:
            raise SchemaMisconfigurationError(
                f"attribute {self.name!r}: defaults are only supported on primitive attributes"
            )
        try:
            return builder(default)
        except TypeError as exc:
            raise SchemaMisconfigurationError(f"attribute {self.name!r}: bad default {default!r}: {exc}") from exc

    # ─────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────
    @property
    def string_target(self) -> Optional[ValueKind]:
        """Kind that attribute-scoped rules are applied to (the element kind for collections)."""
        return self.element_kind if self.kind.is_collection else self.kind

    @property
    def nested(self) -> Optional["Block"]:
        return None

    @property
    def computed_only(self) -> bool:
        return self.computed and not self.optional

    @property
    def configurable(self) -> bool:
        return self.required or self.optional

    def attribute_rules(self) -> tuple[Rule, ...]:
        return tuple(r for r in self.validators if r.scope is RuleScope.ATTRIBUTE)

    def record_rules(self) -> tuple[Rule, ...]:
        return tuple(r for r in self.validators if r.scope is RuleScope.RECORD)

    def type_label(self) -> str:
        labels = {
            ValueKind.BOOL: "Boolean",
            ValueKind.INT64: "Number",
            ValueKind.FLOAT64: "Number",
            ValueKind.STRING: "String",
        }
        return labels.get(self.kind, self.kind.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class String(Attribute):
    kind = ValueKind.STRING


class Bool(Attribute):
    kind = ValueKind.BOOL


class Int64(Attribute):
    kind = ValueKind.INT64


class Float64(Attribute):
    kind = ValueKind.FLOAT64


class _PrimitiveCollection(Attribute):
    """List, set or map whose elements are primitive values."""

    def __init__(self, name: str, element_kind: ValueKind, description: str = "", **kwargs: Any):
        if not isinstance(element_kind, ValueKind) or not element_kind.is_primitive:
            raise SchemaMisconfigurationError(
                f"attribute {name!r}: element kind must be a primitive kind, got {element_kind!r}"
            )
        self.element_kind = element_kind
        super().__init__(name, description, **kwargs)

    def type_label(self) -> str:
        element = {
            ValueKind.BOOL: "Boolean",
            ValueKind.INT64: "Number",
            ValueKind.FLOAT64: "Number",
            ValueKind.STRING: "String",
        }[self.element_kind]
        return f"{self.kind.value.capitalize()} of {element}"


class ListOf(_PrimitiveCollection):
    kind = ValueKind.LIST


class SetOf(_PrimitiveCollection):
    kind = ValueKind.SET


class MapOf(_PrimitiveCollection):
    kind = ValueKind.MAP


class _NestedAttribute(Attribute):
    """Attribute whose value (or whose elements) are records of a nested block."""

    def __init__(
        self,
        name: str,
        attributes: Sequence[Attribute],
        description: str = "",
        *,
        block_validators: Sequence[Rule] = (),
        **kwargs: Any,
    ):
        self._block = Block(attributes, validators=block_validators, owner=name)
        self.element_kind = ValueKind.OBJECT if self.kind.is_collection else None
        super().__init__(name, description, **kwargs)

    @property
    def nested(self) -> "Block":
        return self._block

    @property
    def string_target(self) -> Optional[ValueKind]:
        return None

    def type_label(self) -> str:
        if self.kind is ValueKind.OBJECT:
            return "Attributes"
        return f"Attributes {self.kind.value.capitalize()}"


class SingleNested(_NestedAttribute):
    kind = ValueKind.OBJECT


class ListNested(_NestedAttribute):
    kind = ValueKind.LIST


class SetNested(_NestedAttribute):
    kind = ValueKind.SET


class Block:
    """Ordered set of attribute declarations forming one composite record.

    Record-scoped rules (exactly-one-of) may be passed directly or declared
    on any of the attributes they name. They are collected here once per
    distinct group so a group never reports twice for the same record.
    """

    def __init__(self, attributes: Sequence[Attribute], validators: Sequence[Rule] = (), owner: str = ""):
        self.owner = owner
        self.attributes: tuple[Attribute, ...] = tuple(attributes)
        self._by_name: dict[str, Attribute] = {}
        where = f" in {owner!r}" if owner else ""

        for attribute in self.attributes:
            if not isinstance(attribute, Attribute):
                raise SchemaMisconfigurationError(f"not an attribute declaration{where}: {attribute!r}")
            if attribute.name in self._by_name:
                raise SchemaMisconfigurationError(f"duplicate attribute {attribute.name!r}{where}")
            self._by_name[attribute.name] = attribute

        rules: list[Rule] = []
        seen: set[frozenset[str]] = set()
        candidates = list(validators)
        for attribute in self.attributes:
            candidates.extend(attribute.record_rules())
        for rule in candidates:
            if not is_rule(rule) or rule.scope is not RuleScope.RECORD:
                raise SchemaMisconfigurationError(f"block rules must be record-scoped rules{where}: {rule!r}")
            unknown = [name for name in rule.attributes if name not in self._by_name]
            if unknown:
                raise SchemaMisconfigurationError(
                    f"{type(rule).__name__}{where} references undeclared attributes: {unknown}"
                )
            computed_only = [name for name in rule.attributes if self._by_name[name].computed_only]
            if computed_only:
                raise SchemaMisconfigurationError(
                    f"{type(rule).__name__}{where} references attributes that cannot be configured: {computed_only}"
                )
            key = frozenset(rule.attributes)
            if key in seen:
                continue
            seen.add(key)
            rules.append(rule)
        self.validators: tuple[Rule, ...] = tuple(rules)

    def get(self, name: str) -> Optional[Attribute]:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [a.name for a in self.attributes]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)


class ResourceSchema:
    """Static declaration of one resource type."""

    def __init__(self, type_name: str, description: str, block: Block):
        if not isinstance(type_name, str) or not type_name:
            raise SchemaMisconfigurationError(f"resource type name must be a non-empty string, got {type_name!r}")
        if not isinstance(block, Block):
            raise SchemaMisconfigurationError(f"{type_name}: root must be a Block, got {block!r}")
        self.type_name = type_name
        self.description = description
        self.block = block

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return self.block.attributes

    def markdown_docs(self) -> str:
        """Render reference documentation for this resource as markdown.

        Attributes are grouped into Required / Optional / Read-Only sections
        per block, and every nested block gets its own section after the root.
        """
        lines = [f"# {self.type_name} (Resource)", ""]
        if self.description:
            lines += [self.description, ""]
        lines += ["## Schema", ""]
        _render_block(lines, self.block, prefix="")
        return "\n".join(lines).rstrip() + "\n"

    def __repr__(self) -> str:
        return f"ResourceSchema({self.type_name!r}, {len(self.block)} attributes)"


# ─────────────────────────────────────────────────────────────────────────────
# Markdown rendering
# ─────────────────────────────────────────────────────────────────────────────
def attribute_description(attribute: Attribute) -> str:
    """Description followed by each rule's markdown text and the default, if any."""
    parts = [attribute.description.strip()] if attribute.description.strip() else []
    parts.extend(rule.markdown_description() for rule in attribute.validators)
    if attribute.default is not None:
        parts.append(f"Defaults to `{attribute.default}`.")
    return " ".join(parts)


def _anchor(prefix: str, name: str) -> str:
    return f"nestedatt--{prefix}{name}"


def _render_block(lines: list[str], block: Block, prefix: str) -> None:
    sections = (
        ("Required", [a for a in block if a.required]),
        ("Optional", [a for a in block if a.optional]),
        ("Read-Only", [a for a in block if a.computed_only]),
    )
    for title, attributes in sections:
        if not attributes:
            continue
        lines += [f"### {title}", ""]
        for attribute in attributes:
            label = attribute.type_label()
            if attribute.sensitive:
                label += ", Sensitive"
            entry = f"- `{attribute.name}` ({label})"
            description = attribute_description(attribute)
            if description:
                entry += f" {description}"
            if attribute.nested is not None:
                entry += f" (see [below for nested schema](#{_anchor(prefix, attribute.name)}))"
            lines.append(entry)
        lines.append("")

    for rule in block.validators:
        lines += [f"> {rule.markdown_description()}", ""]

    for attribute in block:
        if attribute.nested is None:
            continue
        lines += [
            f'<a id="{_anchor(prefix, attribute.name)}"></a>',
            f"### Nested Schema for `{prefix.replace('--', '.')}{attribute.name}`",
            "",
        ]
        _render_block(lines, attribute.nested, prefix=f"{prefix}{attribute.name}--")
