"""Dry-run validation endpoint.

POST a resource configuration (JSON, or YAML with a YAML content type) to
``/validate/<type>`` and get every diagnostic back without anything being
sent to Google Workspace.

Response:
    {"resource_type": "...", "valid": true|false, "diagnostics": [...]}
"""
from __future__ import annotations

import json
import logging
from typing import Any

import yaml
from flask import Blueprint, Response, abort, current_app, jsonify, request

bp = Blueprint("validate", __name__)

logger = logging.getLogger(__name__)

YAML_MIMETYPES = {"application/yaml", "application/x-yaml", "text/yaml", "text/x-yaml"}


def _request_body() -> Any:
    """Decode the request body as JSON or YAML (by content type)."""
    raw = request.get_data(as_text=True)
    if not raw.strip():
        abort(400, description="Request body is empty")

    if request.mimetype in YAML_MIMETYPES:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            abort(400, description=f"Invalid YAML body: {exc}")
        except RecursionError:
            abort(400, description="Invalid YAML body: nesting too deep")

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        abort(400, description=f"Invalid JSON body: {exc.msg}")
    except RecursionError:
        abort(400, description="Invalid JSON body: nesting too deep")


@bp.route("/validate/<type_name>", methods=["POST"])
def validate_resource(type_name: str) -> Response:
    """Validate one resource configuration."""
    registry = current_app.config["SCHEMA_REGISTRY"]
    cfg = current_app.config["APP_CONFIG"]

    schema = registry.get(type_name)
    body = _request_body()
    diagnostics = registry.validate(schema.type_name, body, max_workers=cfg.max_workers)

    errors = len(diagnostics.errors())
    logger.info(
        "Validated %s: %d error(s), %d warning(s)",
        type_name,
        errors,
        len(diagnostics) - errors,
    )
    return jsonify({
        "resource_type": schema.type_name,
        "valid": errors == 0,
        "diagnostics": diagnostics.to_list(),
    })
