"""Schema documentation blueprint: resource listings, attribute trees and generated markdown."""
from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, current_app, jsonify

from ..config.settings import validate_provider_config
from ..core.registry import SchemaRegistry
from ..core.schema import Attribute, Block
from ..core.values import to_python

bp = Blueprint("schemas", __name__)


def _registry() -> SchemaRegistry:
    return current_app.config["SCHEMA_REGISTRY"]


def describe_attribute(attribute: Attribute) -> dict[str, Any]:
    """JSON-friendly description of one attribute, nested blocks included."""
    described: dict[str, Any] = {
        "name": attribute.name,
        "type": attribute.type_label(),
        "description": attribute.description,
        "required": attribute.required,
        "optional": attribute.optional,
        "computed": attribute.computed,
        "sensitive": attribute.sensitive,
        "default": to_python(attribute.default) if attribute.default is not None else None,
        "validators": [rule.describe() for rule in attribute.validators],
    }
    if attribute.nested is not None:
        described["attributes"] = describe_block(attribute.nested)
    return described


def describe_block(block: Block) -> list[dict[str, Any]]:
    return [describe_attribute(attribute) for attribute in block]


@bp.route("/schemas", methods=["GET"])
def list_schemas() -> Response:
    """List every registered resource type."""
    return jsonify([
        {"type": schema.type_name, "description": schema.description}
        for schema in _registry()
    ])


@bp.route("/schemas/<type_name>", methods=["GET"])
def get_schema(type_name: str) -> Response:
    """Attribute tree of one resource type."""
    schema = _registry().get(type_name)
    return jsonify({
        "type": schema.type_name,
        "description": schema.description,
        "attributes": describe_block(schema.block),
        "validators": [rule.describe() for rule in schema.block.validators],
    })


@bp.route("/schemas/<type_name>/docs", methods=["GET"])
def schema_docs(type_name: str) -> Response:
    """Generated markdown reference for one resource type."""
    schema = _registry().get(type_name)
    return Response(schema.markdown_docs(), status=200, mimetype="text/markdown")


@bp.route("/provider", methods=["GET"])
def provider_status() -> Response:
    """Provider settings (secrets masked) and their static check results."""
    cfg = current_app.config["APP_CONFIG"]
    diagnostics = validate_provider_config(cfg)
    return jsonify({
        "config": cfg.to_safe_dict(),
        "valid": not diagnostics.has_error(),
        "diagnostics": diagnostics.to_list(),
    })
