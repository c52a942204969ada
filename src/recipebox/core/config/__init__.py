"""Configuration module with YAML and environment variable support."""

from .settings import AuthMode, Settings, get_settings


__all__ = [
    "AuthMode",
    "Settings",
    "get_settings",
]
