"""Configuration loader for Aimee.

Loads configuration from TOML files and secrets from .env files.
Environment variables can override any configuration value.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from aimee.config.schema import AimeeConfig, SecretsConfig

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_MAPPINGS = {
    # Server
    "SERVER_HOST": ("server", "host"),
    "SERVER_PORT": ("server", "port"),
    "SERVER_DEBUG": ("server", "debug"),
    "HOST": ("server", "host"),  # Shorthand
    "PORT": ("server", "port"),  # Shorthand
    "DEBUG": ("server", "debug"),  # Shorthand
    # Auth
    "AUTH_ENABLED": ("auth", "enabled"),
    "AUTH_USERNAME": ("auth", "username"),
    # Gateway
    "GATEWAY_BACKEND": ("gateway", "backend"),
    "GATEWAY_TIMEOUT_SECONDS": ("gateway", "timeout_seconds"),
    "GATEWAY_CHAT_MODEL": ("gateway", "chat_model"),
    "GATEWAY_VOICE_ID": ("gateway", "voice_id"),
    "VOICE_ID": ("gateway", "voice_id"),  # Shorthand
    # Features
    "FEATURES_EMAIL_INTENTS": ("features", "email_intents"),
    "FEATURES_SKIP_AUDIO_FOR_IOS": ("features", "skip_audio_for_ios"),
    "FEATURES_CHAT_REPHRASE": ("features", "chat_rephrase"),
    # Interaction log
    "LOG_MAX_ENTRIES": ("log", "max_entries"),
    # Storage
    "STORAGE_MAX_UPLOAD_MB": ("storage", "max_upload_mb"),
}

INT_KEYS = {"port", "max_entries", "max_upload_mb"}
FLOAT_KEYS = {"timeout_seconds"}
BOOL_KEYS = {
    "debug",
    "enabled",
    "email_intents",
    "skip_audio_for_ios",
    "chat_rephrase",
}

# secrets.env / environment key -> SecretsConfig field
SECRET_KEYS = {
    "AIMEE_SECRET_KEY": "secret_key",
    "AIMEE_ADMIN_PASSWORD": "admin_password",
    "AIMEE_OPENAI_API_KEY": "openai_api_key",
    "OPENAI_API_KEY": "openai_api_key",  # Also check common name
    "AIMEE_ELEVENLABS_API_KEY": "elevenlabs_api_key",
    "ELEVENLABS_API_KEY": "elevenlabs_api_key",  # Also check common name
}


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/aimee/config.toml (user config)
    3. /etc/aimee/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "aimee" / "config.toml",
        Path("/etc/aimee/config.toml"),
    ]


def get_secrets_search_paths() -> list[Path]:
    """Get the list of paths to search for secrets files, in priority order."""
    return [
        Path.cwd() / "secrets.env",
        Path.home() / ".config" / "aimee" / "secrets.env",
        Path("/etc/aimee/secrets.env"),
    ]


def _first_existing(paths: list[Path]) -> Path | None:
    for path in paths:
        if path.exists() and path.is_file():
            logger.debug("Found file: %s", path)
            return path
    return None


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    return _first_existing(get_config_search_paths())


def find_secrets_file() -> Path | None:
    """Find the first existing secrets file from search paths."""
    return _first_existing(get_secrets_search_paths())


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse a simple .env file into a dictionary.

    Supports:
    - KEY=value
    - KEY="quoted value"
    - # comments
    - Empty lines
    """
    env_vars: dict[str, str] = {}

    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip()

            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]

            env_vars[key] = value

    return env_vars


def _coerce(key: str, value: str) -> Any:
    if key in INT_KEYS:
        return int(value)
    if key in FLOAT_KEYS:
        return float(value)
    if key in BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    return value


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = "AIMEE") -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - AIMEE_SERVER_PORT -> config_dict["server"]["port"]
    - AIMEE_GATEWAY_BACKEND -> config_dict["gateway"]["backend"]
    - etc.

    Note: This modifies config_dict in place.
    """
    for suffix, (section, key) in ENV_MAPPINGS.items():
        value = os.environ.get(f"{prefix}_{suffix}")
        if value is None:
            continue
        config_dict.setdefault(section, {})[key] = _coerce(key, value)

    # Hosting platforms inject a bare PORT
    if "PORT" in os.environ and f"{prefix}_PORT" not in os.environ:
        config_dict.setdefault("server", {}).setdefault("port", int(os.environ["PORT"]))


def load_secrets(secrets_file: Path | None = None) -> SecretsConfig:
    """Load secrets from environment variables and optional secrets.env file.

    Environment variables take precedence over file values.
    """
    secrets_dict: dict[str, str] = {}

    if secrets_file is None:
        secrets_file = find_secrets_file()

    if secrets_file and secrets_file.exists():
        logger.info("Loading secrets from: %s", secrets_file)
        file_secrets = parse_env_file(secrets_file)
        for file_key, config_key in SECRET_KEYS.items():
            if file_secrets.get(file_key):
                secrets_dict[config_key] = file_secrets[file_key]

    for env_var, config_key in SECRET_KEYS.items():
        value = os.environ.get(env_var)
        if value:
            secrets_dict[config_key] = value

    return SecretsConfig(**secrets_dict)


def load_config(config_file: Path | None = None) -> AimeeConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        AimeeConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return AimeeConfig(**config_dict)
