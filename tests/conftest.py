"""Pytest shared fixtures."""
import pathlib
import sys

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gworkspace_schema.config import settings
from gworkspace_schema.config.settings import ProviderConfig
from gworkspace_schema.core.registry import build_registry
from gworkspace_schema.flask_app import create_app

PROVIDER_ENV_VARS = settings.CREDENTIALS_ENV_VARS + [
    "GOOGLEWORKSPACE_ACCESS_TOKEN",
    "GOOGLEWORKSPACE_CUSTOMER_ID",
    "GOOGLEWORKSPACE_IMPERSONATED_USER_EMAIL",
    "GOOGLEWORKSPACE_SERVICE_ACCOUNT",
    "GOOGLEWORKSPACE_OAUTH_SCOPES",
    "VALIDATION_MAX_WORKERS",
    "LOG_LEVEL",
]


# ─────────────────────────────────────────────────────────────────────────────
# Environment Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep host environment variables and /run/secrets out of every test."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    secrets_dir = tmp_path / "run-secrets"
    secrets_dir.mkdir()
    monkeypatch.setattr(settings, "SECRETS_DIR", secrets_dir)
    return secrets_dir


def _make_config(**overrides):
    base = dict(
        credentials="",
        access_token="",
        service_account="",
        customer_id="C0123abcd",
        impersonated_user_email="",
        max_workers=1,
        log_level="WARNING",
    )
    base.update(overrides)
    return ProviderConfig(**base)


@pytest.fixture
def make_config():
    """Factory for ProviderConfig with test defaults; keyword overrides win."""
    return _make_config


# ─────────────────────────────────────────────────────────────────────────────
# Shared Objects
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(scope="session")
def registry():
    """Registry of every resource schema (schemas are immutable, so one per session)."""
    return build_registry()


@pytest.fixture
def app(registry):
    app = create_app(registry=registry, config=_make_config())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
