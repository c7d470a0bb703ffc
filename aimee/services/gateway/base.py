"""Base AI gateway abstraction and factory."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from aimee.config import GatewayConfig, Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    """Outcome of a provider call: either a value or an error message."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> "GatewayResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "GatewayResult[T]":
        return cls(ok=False, error=error)

    def value_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.ok else default


@dataclass(frozen=True)
class VoiceProfile:
    """Voice settings for speech synthesis."""

    voice_id: str
    model_id: str = "eleven_monolingual_v1"
    stability: float = 0.5
    similarity_boost: float = 0.5

    @classmethod
    def from_config(cls, config: "GatewayConfig") -> "VoiceProfile":
        return cls(
            voice_id=config.voice_id,
            model_id=config.voice_model_id,
            stability=config.voice_stability,
            similarity_boost=config.voice_similarity_boost,
        )


class AIGateway(ABC):
    """Chat completion, transcription and speech synthesis behind one interface.

    The public methods never raise for provider problems. Every call runs
    under ``timeout`` seconds and any error or timeout comes back as a
    failed ``GatewayResult`` so callers decide how to degrade.
    """

    def __init__(self, settings: "Settings") -> None:
        """Initialize the gateway.

        Args:
            settings: Application settings.
        """
        self.settings = settings
        self.config = settings.gateway
        self.timeout = self.config.timeout_seconds
        self.default_voice = VoiceProfile.from_config(self.config)

    @property
    def can_synthesize(self) -> bool:
        """Whether speech synthesis is configured at all."""
        return True

    async def _guard(self, operation: str, call: Awaitable[T]) -> GatewayResult[T]:
        try:
            value = await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("%s timed out after %.1fs", operation, self.timeout)
            return GatewayResult.failure(f"{operation} timed out")
        except Exception as e:
            logger.warning("%s failed: %s", operation, e)
            return GatewayResult.failure(f"{operation} failed: {e}")
        return GatewayResult.success(value)

    async def complete(self, system_prompt: str, user_query: str) -> GatewayResult[str]:
        """Ask the chat model for a reply to ``user_query``."""
        return await self._guard("Chat completion", self._complete(system_prompt, user_query))

    async def transcribe(
        self, audio: bytes, filename: str = "audio.webm"
    ) -> GatewayResult[str]:
        """Convert recorded speech to text."""
        return await self._guard("Transcription", self._transcribe(audio, filename))

    async def synthesize(
        self, text: str, voice: VoiceProfile | None = None
    ) -> GatewayResult[bytes]:
        """Render text as MPEG audio."""
        return await self._guard(
            "Speech synthesis", self._synthesize(text, voice or self.default_voice)
        )

    @abstractmethod
    async def _complete(self, system_prompt: str, user_query: str) -> str:
        pass

    @abstractmethod
    async def _transcribe(self, audio: bytes, filename: str) -> str:
        pass

    @abstractmethod
    async def _synthesize(self, text: str, voice: VoiceProfile) -> bytes:
        pass

    async def aclose(self) -> None:
        """Release any network clients held by the gateway."""


_gateway: AIGateway | None = None


def get_ai_gateway() -> AIGateway:
    """Get the configured AI gateway instance.

    Returns:
        AIGateway instance based on settings, created on first use.
    """
    global _gateway
    if _gateway is None:
        from aimee.config import settings

        if settings.gateway_backend == "offline":
            from aimee.services.gateway.offline import OfflineAIGateway

            _gateway = OfflineAIGateway(settings)
        else:
            from aimee.services.gateway.hosted import HostedAIGateway

            _gateway = HostedAIGateway(settings)
    return _gateway


async def close_ai_gateway() -> None:
    """Close and forget the cached gateway."""
    global _gateway
    if _gateway is not None:
        await _gateway.aclose()
        _gateway = None
