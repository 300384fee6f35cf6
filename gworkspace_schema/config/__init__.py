"""Configuration module for the Google Workspace schema service."""
from .settings import DEFAULT_CLIENT_SCOPES, ProviderConfig, load_settings, validate_provider_config

__all__ = ["DEFAULT_CLIENT_SCOPES", "ProviderConfig", "load_settings", "validate_provider_config"]
