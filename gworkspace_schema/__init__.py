"""Google Workspace resource schemas and attribute validation.

To validate a configuration:
    from gworkspace_schema.core.registry import build_registry
    registry = build_registry()
    diagnostics = registry.validate("googleworkspace_user", config)

To serve schema docs and dry-run validation over HTTP:
    from gworkspace_schema.flask_app import create_app
    app = create_app()
"""
# flask_app is not imported here; core and CLI must import without Flask
