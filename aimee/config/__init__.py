"""Aimee configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/aimee/config.toml (user config)
4. /etc/aimee/config.toml (system config)

Secrets are loaded from secrets.env files in the same directories.
"""

from aimee.config.schema import (
    AimeeConfig,
    AuthConfig,
    FeatureConfig,
    GatewayConfig,
    LogConfig,
    SecretsConfig,
    ServerConfig,
    StorageConfig,
)
from aimee.config.settings import Settings, get_settings, reset_settings, settings

__all__ = [
    "AimeeConfig",
    "AuthConfig",
    "FeatureConfig",
    "GatewayConfig",
    "LogConfig",
    "SecretsConfig",
    "ServerConfig",
    "StorageConfig",
    "Settings",
    "get_settings",
    "reset_settings",
    "settings",
]
