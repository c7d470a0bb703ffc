"""Offline gateway for development and testing."""

import logging
from typing import TYPE_CHECKING

from aimee.exceptions import ServiceError
from aimee.services.gateway.base import AIGateway, VoiceProfile

if TYPE_CHECKING:
    from aimee.config import Settings

logger = logging.getLogger(__name__)


class OfflineAIGateway(AIGateway):
    """Gateway that never reaches a provider.

    Every call fails, which exercises the same degradation paths as a
    provider outage: answers come back without audio and chat falls back
    to its apology text.
    """

    def __init__(self, settings: "Settings") -> None:
        super().__init__(settings)
        logger.info("Using offline AI gateway (provider calls are disabled)")

    @property
    def can_synthesize(self) -> bool:
        return False

    async def _complete(self, system_prompt: str, user_query: str) -> str:
        logger.info("Offline gateway: chat completion requested for %r", user_query)
        raise ServiceError("AI gateway is offline")

    async def _transcribe(self, audio: bytes, filename: str) -> str:
        logger.info("Offline gateway: transcription requested (%d bytes)", len(audio))
        raise ServiceError("AI gateway is offline")

    async def _synthesize(self, text: str, voice: VoiceProfile) -> bytes:
        logger.info("Offline gateway: speech requested (%d chars)", len(text))
        raise ServiceError("AI gateway is offline")
