"""Pydantic models for Aimee configuration.

These models define the structure of config.toml and secrets.env files.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    enforce_https: bool = False
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class AuthConfig(BaseModel):
    """Authentication configuration."""

    enabled: bool = True
    username: str = "admin"
    token_lifetime_minutes: int = 120
    auth_rate_limit_per_minute: int = 30


class GatewayConfig(BaseModel):
    """External AI provider configuration."""

    backend: Literal["hosted", "offline"] = "hosted"
    timeout_seconds: float = 20.0
    chat_model: str = "gpt-4"
    chat_temperature: float = 0.6
    system_prompt: str = (
        "You are Aimee, a voice-powered wine sales assistant. "
        "Answer clearly and concisely."
    )
    transcription_model: str = "whisper-1"
    elevenlabs_url: str = "https://api.elevenlabs.io/v1"
    voice_id: str = "rzsnuMd2pwYz1rGtMIVI"
    voice_model_id: str = "eleven_monolingual_v1"
    voice_stability: float = 0.5
    voice_similarity_boost: float = 0.5


class FeatureConfig(BaseModel):
    """Behaviour switches for the query endpoints."""

    email_intents: bool = True
    skip_audio_for_ios: bool = True
    chat_rephrase: bool = False


class LogConfig(BaseModel):
    """Interaction log configuration."""

    max_entries: int = Field(default=100, ge=1)
    recent_activity: int = Field(default=5, ge=0)


class StorageConfig(BaseModel):
    """Upload handling configuration."""

    max_upload_mb: int = 25

    @property
    def max_upload_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_mb * 1024 * 1024


class AimeeConfig(BaseModel):
    """Main Aimee configuration loaded from config.toml."""

    app_name: str = "Aimee"
    server: ServerConfig = Field(default_factory=ServerConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
    features: FeatureConfig = Field(default_factory=FeatureConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


class SecretsConfig(BaseModel):
    """Secrets loaded from secrets.env file.

    These are sensitive values that should not be stored in config.toml.
    """

    secret_key: str | None = None
    admin_password: str | None = None
    openai_api_key: str | None = None
    elevenlabs_api_key: str | None = None
