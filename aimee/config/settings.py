"""Global settings instance for Aimee.

This module provides a unified settings object that combines:
- Configuration from config.toml
- Secrets from secrets.env
- Environment variable overrides

The settings object provides a flat interface over the structured configuration.
"""

import logging
import secrets as secrets_module

from aimee.config.loader import load_config, load_secrets
from aimee.config.schema import AimeeConfig, GatewayConfig, SecretsConfig

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "password"


class Settings:
    """Unified settings object combining config and secrets."""

    def __init__(
        self,
        config: AimeeConfig | None = None,
        secrets: SecretsConfig | None = None,
    ):
        """Initialize settings.

        Args:
            config: Optional AimeeConfig instance. If not provided, loads from file.
            secrets: Optional SecretsConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()
        self._secrets = secrets or load_secrets()
        # Secret name -> "generated" or "default" for values not configured
        self._filled_secrets: dict[str, str] = {}

        if not self._secrets.secret_key:
            self._secrets.secret_key = secrets_module.token_urlsafe(32)
            self._filled_secrets["secret_key"] = "generated"
            logger.warning(
                "SECURITY WARNING: No secret key configured. "
                "A random secret key has been generated. Tokens will be invalidated "
                "when the server restarts. Set AIMEE_SECRET_KEY for production use."
            )

        if not self._secrets.admin_password:
            self._secrets.admin_password = DEFAULT_ADMIN_PASSWORD
            self._filled_secrets["admin_password"] = "default"
            if self._config.auth.enabled:
                logger.warning(
                    "SECURITY WARNING: AIMEE_ADMIN_PASSWORD is not set, "
                    "falling back to the default operator password."
                )

    @property
    def config(self) -> AimeeConfig:
        """Get the full configuration object."""
        return self._config

    @property
    def secrets(self) -> SecretsConfig:
        """Get the secrets configuration object."""
        return self._secrets

    def secret_status(self, name: str) -> str:
        """Describe where a secret came from: set, unset, generated or default."""
        if name in self._filled_secrets:
            return self._filled_secrets[name]
        return "set" if getattr(self._secrets, name) else "unset"

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def enforce_https(self) -> bool:
        return self._config.server.enforce_https

    @property
    def cors_origins(self) -> list[str]:
        return self._config.server.cors_origins

    # Auth
    @property
    def auth_enabled(self) -> bool:
        return self._config.auth.enabled

    @property
    def admin_username(self) -> str:
        return self._config.auth.username

    @property
    def token_lifetime_minutes(self) -> int:
        return self._config.auth.token_lifetime_minutes

    @property
    def auth_rate_limit_per_minute(self) -> int:
        return self._config.auth.auth_rate_limit_per_minute

    # Gateway
    @property
    def gateway_backend(self) -> str:
        return self._config.gateway.backend

    @property
    def gateway(self) -> GatewayConfig:
        return self._config.gateway

    # Features
    @property
    def email_intents_enabled(self) -> bool:
        return self._config.features.email_intents

    @property
    def skip_audio_for_ios(self) -> bool:
        return self._config.features.skip_audio_for_ios

    @property
    def chat_rephrase(self) -> bool:
        return self._config.features.chat_rephrase

    # Interaction log
    @property
    def log_max_entries(self) -> int:
        return self._config.log.max_entries

    @property
    def recent_activity_size(self) -> int:
        return self._config.log.recent_activity

    # Storage
    @property
    def max_upload_size_bytes(self) -> int:
        return self._config.storage.max_upload_bytes

    # Secrets
    @property
    def secret_key(self) -> str:
        return self._secrets.secret_key or ""

    @property
    def admin_password(self) -> str:
        return self._secrets.admin_password or ""

    @property
    def openai_api_key(self) -> str | None:
        return self._secrets.openai_api_key

    @property
    def elevenlabs_api_key(self) -> str | None:
        return self._secrets.elevenlabs_api_key


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
