"""Gateway backed by OpenAI (chat, Whisper) and ElevenLabs (speech)."""

import logging
from typing import TYPE_CHECKING

import httpx
from openai import AsyncOpenAI

from aimee.exceptions import ServiceError
from aimee.services.gateway.base import AIGateway, VoiceProfile

if TYPE_CHECKING:
    from aimee.config import Settings

logger = logging.getLogger(__name__)


class HostedAIGateway(AIGateway):
    """Calls the hosted providers. Clients are created lazily on first use."""

    def __init__(self, settings: "Settings") -> None:
        super().__init__(settings)
        self._openai: AsyncOpenAI | None = None
        self._http: httpx.AsyncClient | None = None

    @property
    def can_synthesize(self) -> bool:
        return bool(self.settings.elevenlabs_api_key)

    def _get_openai(self) -> AsyncOpenAI:
        if self._openai is None:
            api_key = self.settings.openai_api_key
            if not api_key:
                raise ServiceError("No OpenAI API key configured")
            self._openai = AsyncOpenAI(api_key=api_key, timeout=self.timeout)
        return self._openai

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.config.elevenlabs_url,
                timeout=self.timeout,
            )
        return self._http

    async def _complete(self, system_prompt: str, user_query: str) -> str:
        response = await self._get_openai().chat.completions.create(
            model=self.config.chat_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_query},
            ],
            temperature=self.config.chat_temperature,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ServiceError("Chat completion returned no content")
        return content.strip()

    async def _transcribe(self, audio: bytes, filename: str) -> str:
        transcription = await self._get_openai().audio.transcriptions.create(
            model=self.config.transcription_model,
            file=(filename, audio),
        )
        return transcription.text.strip()

    async def _synthesize(self, text: str, voice: VoiceProfile) -> bytes:
        api_key = self.settings.elevenlabs_api_key
        if not api_key:
            raise ServiceError("No ElevenLabs API key configured")

        logger.debug("Requesting speech with voice %s", voice.voice_id)
        response = await self._get_http().post(
            f"/text-to-speech/{voice.voice_id}",
            headers={
                "Accept": "audio/mpeg",
                "xi-api-key": api_key,
            },
            json={
                "text": text,
                "model_id": voice.model_id,
                "voice_settings": {
                    "stability": voice.stability,
                    "similarity_boost": voice.similarity_boost,
                },
            },
        )
        if response.status_code != 200:
            raise ServiceError(f"ElevenLabs returned HTTP {response.status_code}")
        return response.content

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None
        if self._openai is not None:
            await self._openai.close()
            self._openai = None
