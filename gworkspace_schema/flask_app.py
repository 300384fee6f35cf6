"""Flask application factory and bootstrap.

This module provides the create_app() factory function for initializing
the Flask application with the schema registry, provider settings,
blueprints and error handlers.
"""
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import ProviderConfig, load_settings, validate_provider_config
from .core.registry import SchemaRegistry, build_registry

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(registry: Optional[SchemaRegistry] = None, config: Optional[ProviderConfig] = None) -> Flask:
    """Create and configure Flask application.

    Args:
        registry: Schema registry to serve (built from every resource when omitted)
        config: Provider settings (loaded from the environment when omitted)
    """
    cfg = config if config is not None else load_settings()
    _configure_logging(cfg.log_level)

    app = Flask(__name__)

    # Store registry and config for easy access in routes
    app.config["APP_CONFIG"] = cfg
    app.config["SCHEMA_REGISTRY"] = registry if registry is not None else build_registry()
    app.json.sort_keys = False  # type: ignore[attr-defined]

    # Trust X-Forwarded-* headers from proxy (nginx)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)  # type: ignore

    # Register blueprints
    from .api import errors, health, schemas, validate

    app.register_blueprint(health.bp)
    app.register_blueprint(schemas.bp)
    app.register_blueprint(validate.bp)

    # Register error handlers
    errors.register_error_handlers(app)

    # Log startup info
    for diagnostic in validate_provider_config(cfg):
        if diagnostic.is_error:
            logger.warning("Provider config: %s: %s", diagnostic.summary, diagnostic.detail)
        else:
            logger.info("Provider config: %s: %s", diagnostic.summary, diagnostic.detail)
    logger.info("Serving %d resource schemas", len(app.config["SCHEMA_REGISTRY"]))

    return app


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger().setLevel(level)
