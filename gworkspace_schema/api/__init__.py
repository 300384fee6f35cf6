"""HTTP blueprints: health checks, schema documentation and dry-run validation."""
