"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from ..core.diagnostics import Diagnostics
from ..core.paths import AttributePath

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")

CREDENTIALS_ENV_VARS = [
    "GOOGLEWORKSPACE_CREDENTIALS",
    "GOOGLEWORKSPACE_CLOUD_KEYFILE_JSON",
    "GOOGLE_CREDENTIALS",
]

DEFAULT_CLIENT_SCOPES = [
    "https://www.googleapis.com/auth/gmail.settings.basic",
    "https://www.googleapis.com/auth/gmail.settings.sharing",
    "https://www.googleapis.com/auth/chrome.management.policy",
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/admin.directory.customer",
    "https://www.googleapis.com/auth/admin.directory.domain",
    "https://www.googleapis.com/auth/admin.directory.group",
    "https://www.googleapis.com/auth/admin.directory.orgunit",
    "https://www.googleapis.com/auth/admin.directory.rolemanagement",
    "https://www.googleapis.com/auth/admin.directory.userschema",
    "https://www.googleapis.com/auth/admin.directory.user",
    "https://www.googleapis.com/auth/apps.groups.settings",
]


def _load_secret_from_file(secret_name: str, env_vars: list[str] | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variables, first non-empty one wins (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_vars: Environment variable names to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = SECRETS_DIR / secret_name

    # Priority 1: Read from /run/secrets
    if secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as exc:
            logger.warning("Failed to read %s: %s", secret_file, exc)
        else:
            if secret_value:
                logger.info("Loaded %s from %s", secret_name, SECRETS_DIR)
                return secret_value

    # Priority 2: Fallback to environment variables
    for env_var in env_vars or []:
        secret_value = os.environ.get(env_var)
        if secret_value:
            logger.info("Loaded %s from environment (fallback)", env_var)
            return secret_value

    return None


def _positive_int(var_name: str, default: int) -> int:
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {var_name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RuntimeError(f"Environment variable {var_name} must be at least 1, got {value}")
    return value


@dataclass
class ProviderConfig:
    """Provider configuration container."""
    # Authentication
    credentials: str = ""
    access_token: str = ""
    service_account: str = ""
    oauth_scopes: list[str] = field(default_factory=lambda: list(DEFAULT_CLIENT_SCOPES))

    # Tenant
    customer_id: str = ""
    impersonated_user_email: str = ""

    # Runtime
    max_workers: int = 1
    log_level: str = "INFO"

    def to_safe_dict(self) -> dict:
        """Settings with secret values masked, for logging and the service's status output."""
        return {
            "credentials": "(set)" if self.credentials else "",
            "access_token": "(set)" if self.access_token else "",
            "service_account": self.service_account,
            "oauth_scopes": list(self.oauth_scopes),
            "customer_id": self.customer_id,
            "impersonated_user_email": self.impersonated_user_email,
            "max_workers": self.max_workers,
            "log_level": self.log_level,
        }


def load_settings() -> ProviderConfig:
    """Load provider settings from /run/secrets and the environment."""
    credentials = _load_secret_from_file("googleworkspace_credentials", CREDENTIALS_ENV_VARS) or ""
    access_token = _load_secret_from_file("googleworkspace_access_token", ["GOOGLEWORKSPACE_ACCESS_TOKEN"]) or ""

    oauth_scopes = [
        scope.strip()
        for scope in os.environ.get("GOOGLEWORKSPACE_OAUTH_SCOPES", "").split(",")
        if scope.strip()
    ]
    if not oauth_scopes:
        oauth_scopes = list(DEFAULT_CLIENT_SCOPES)

    config = ProviderConfig(
        credentials=credentials,
        access_token=access_token,
        service_account=os.environ.get("GOOGLEWORKSPACE_SERVICE_ACCOUNT", "").strip(),
        oauth_scopes=oauth_scopes,
        customer_id=os.environ.get("GOOGLEWORKSPACE_CUSTOMER_ID", "").strip(),
        impersonated_user_email=os.environ.get("GOOGLEWORKSPACE_IMPERSONATED_USER_EMAIL", "").strip(),
        max_workers=_positive_int("VALIDATION_MAX_WORKERS", 1),
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
    logger.info(
        "Settings loaded; customer_id=%s; scopes=%d; max_workers=%d",
        config.customer_id or "<unset>",
        len(config.oauth_scopes),
        config.max_workers,
    )
    return config


def path_or_contents(value: str) -> tuple[str, bool]:
    """Resolve a value that is either a file path or inline contents.

    A leading ``~`` is expanded. When the (expanded) path names an existing
    file its contents are returned; otherwise the value itself is.

    Returns:
        (contents, was_path)

    Raises:
        OSError: If the path exists but cannot be read
    """
    if not value:
        return value, False
    path = Path(os.path.expanduser(value)) if value.startswith("~") else Path(value)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        is_file = False
    if is_file:
        return path.read_text(), True
    return value, False


def _credentials_problem(credentials: str) -> str | None:
    """Why ``credentials`` is unusable, or None when it is fine."""
    try:
        contents, was_path = path_or_contents(credentials)
    except OSError as exc:
        return f"credentials file could not be read: {exc}"
    if was_path:
        return None
    try:
        parsed = json.loads(contents)
    except json.JSONDecodeError as exc:
        return f"credentials are neither an existing file nor valid JSON: {exc.msg}"
    if not isinstance(parsed, dict) or "type" not in parsed:
        return "JSON credentials must be an object with a \"type\" key"
    return None


def validate_provider_config(config: ProviderConfig) -> Diagnostics:
    """Static checks on provider settings, reported the same way resource checks are.

    Returns:
        Diagnostics; errors mean the provider cannot authenticate as configured
    """
    diagnostics = Diagnostics()

    if not config.customer_id:
        diagnostics.add_error(
            "customer_id is required",
            "set GOOGLEWORKSPACE_CUSTOMER_ID to the account's customer ID",
            AttributePath.of("customer_id"),
        )

    if config.credentials:
        problem = _credentials_problem(config.credentials)
        if problem:
            diagnostics.add_error("invalid credentials", problem, AttributePath.of("credentials"))

    if config.access_token and config.impersonated_user_email and not config.service_account:
        diagnostics.add_error(
            "Invalid provider config",
            "`service_account` is required to impersonate a user with the `access_token` authentication",
            AttributePath.of("service_account"),
        )

    if config.access_token and config.credentials:
        diagnostics.add_warning(
            "conflicting authentication settings",
            "both `access_token` and `credentials` are set; `access_token` takes precedence",
            AttributePath.of("access_token"),
        )

    return diagnostics
