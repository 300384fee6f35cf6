"""Validate Google Workspace resource configuration files.

Usage:
    python scripts/validate_config.py validate users.yaml --type googleworkspace_user
    python scripts/validate_config.py validate workspace.yaml --format json --workers 4
    python scripts/validate_config.py list-types
    python scripts/validate_config.py docs googleworkspace_org_unit
    python scripts/validate_config.py provider

A file passed without ``--type`` maps resource types to one configuration or
a list of them:

    googleworkspace_group:
      - email: eng@example.com
      - email: ops@example.com
    googleworkspace_org_unit:
      name: sales
      parent_org_unit_path: /

Exit codes: 0 when no error diagnostic was reported, 1 otherwise, 2 when the
file cannot be read or parsed.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import yaml

from gworkspace_schema.config import load_settings, validate_provider_config
from gworkspace_schema.core.decoder import apply_defaults, decode_config
from gworkspace_schema.core.diagnostics import Diagnostics
from gworkspace_schema.core.engine import validate_record
from gworkspace_schema.core.exceptions import UnknownResourceTypeError
from gworkspace_schema.core.registry import SchemaRegistry, build_registry
from gworkspace_schema.core.values import to_python

logger = logging.getLogger("validate_config")


def _load_file(path: Path) -> Any:
    """Parse a YAML or JSON file (JSON is valid YAML)."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def _entries(document: Any, type_name: Optional[str]) -> list[tuple[str, int, Any]]:
    """Flatten a document into (resource_type, index, config) entries."""
    if type_name:
        configs = document if isinstance(document, list) else [document]
        return [(type_name, i, config) for i, config in enumerate(configs)]

    if not isinstance(document, dict):
        raise ValueError("without --type the file must map resource types to configurations")
    entries = []
    for resource_type, configs in document.items():
        if not isinstance(configs, list):
            configs = [configs]
        entries.extend((str(resource_type), i, config) for i, config in enumerate(configs))
    return entries


def _check(
    registry: SchemaRegistry, resource_type: str, config: Any, workers: int, plan: bool
) -> tuple[Diagnostics, Any]:
    """Validate one configuration; the planned config is returned only when it is valid and requested."""
    schema = registry.get(resource_type)
    record, diagnostics = decode_config(schema.block, config)
    diagnostics.extend(validate_record(schema, record, max_workers=workers))
    planned = None
    if plan and not diagnostics.has_error():
        planned = to_python(apply_defaults(schema.block, record))
    return diagnostics, planned


def cmd_validate(args: argparse.Namespace, registry: SchemaRegistry) -> int:
    path = Path(args.file)
    try:
        document = _load_file(path)
        entries = _entries(document, args.type)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        print(f"[validate] Error: cannot load {path}: {exc}", file=sys.stderr)
        return 2

    results = []
    failed = False
    for resource_type, index, config in entries:
        try:
            diagnostics, planned = _check(registry, resource_type, config, args.workers, args.plan)
        except UnknownResourceTypeError as exc:
            print(f"[validate] Error: {exc}", file=sys.stderr)
            failed = True
            continue
        failed = failed or diagnostics.has_error()
        results.append({
            "resource_type": resource_type,
            "index": index,
            "valid": not diagnostics.has_error(),
            "diagnostics": diagnostics,
            "planned": planned,
        })

    if args.format == "json":
        output = []
        for result in results:
            item = dict(result, diagnostics=result["diagnostics"].to_list())
            if item["planned"] is None:
                del item["planned"]
            output.append(item)
        print(json.dumps(output, indent=2))
    else:
        errors = warnings = 0
        for result in results:
            label = f"{result['resource_type']}[{result['index']}]"
            for diagnostic in result["diagnostics"]:
                print(f"{label}: {diagnostic}")
            errors += len(result["diagnostics"].errors())
            warnings += len(result["diagnostics"].warnings())
            if result["planned"] is not None:
                print(f"{label}: planned configuration")
                print(yaml.safe_dump(result["planned"], sort_keys=False).rstrip())
        print(f"{len(results)} configuration(s) checked: {errors} error(s), {warnings} warning(s)")

    logger.debug("Validated %d configuration(s) from %s", len(results), path)
    return 1 if failed else 0


def cmd_list_types(args: argparse.Namespace, registry: SchemaRegistry) -> int:
    for schema in registry:
        print(f"{schema.type_name}\t{schema.description}")
    return 0


def cmd_docs(args: argparse.Namespace, registry: SchemaRegistry) -> int:
    try:
        schema = registry.get(args.type_name)
    except UnknownResourceTypeError as exc:
        print(f"[docs] Error: {exc}", file=sys.stderr)
        return 1
    print(schema.markdown_docs(), end="")
    return 0


def cmd_provider(args: argparse.Namespace, registry: SchemaRegistry) -> int:
    diagnostics = validate_provider_config(load_settings())
    for diagnostic in diagnostics:
        print(diagnostic)
    if not diagnostics.has_error():
        print("provider configuration ok")
    return 1 if diagnostics.has_error() else 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Google Workspace configuration validator")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="cmd")

    sv = sub.add_parser("validate", help="Validate a YAML/JSON configuration file")
    sv.add_argument("file")
    sv.add_argument("--type", help="Resource type of every configuration in the file")
    sv.add_argument("--workers", type=int, default=1, help="Threads used per configuration (default: 1)")
    sv.add_argument("--format", choices=["text", "json"], default="text")
    sv.add_argument("--plan", action="store_true", help="Print valid configurations with defaults applied")

    sub.add_parser("list-types", help="List registered resource types")

    sd = sub.add_parser("docs", help="Print the markdown reference for a resource type")
    sd.add_argument("type_name")

    sub.add_parser("provider", help="Check provider settings from the environment")

    args = parser.parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level, format="%(levelname)s [%(name)s] %(message)s")

    if not args.cmd:
        parser.print_help()
        return 0

    if args.cmd == "validate" and args.workers < 1:
        parser.error("--workers must be at least 1")

    registry = build_registry()
    commands = {
        "validate": cmd_validate,
        "list-types": cmd_list_types,
        "docs": cmd_docs,
        "provider": cmd_provider,
    }
    return commands[args.cmd](args, registry)


if __name__ == "__main__":
    sys.exit(main())
