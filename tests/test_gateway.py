"""Tests for the AI provider gateways."""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from aimee.config import AimeeConfig, GatewayConfig, SecretsConfig, Settings
from aimee.services.gateway import (
    AIGateway,
    GatewayResult,
    HostedAIGateway,
    OfflineAIGateway,
    VoiceProfile,
)


def _settings(timeout: float = 1.0, **secrets) -> Settings:
    config = AimeeConfig(gateway=GatewayConfig(timeout_seconds=timeout))
    return Settings(config=config, secrets=SecretsConfig(secret_key="k", **secrets))


class ScriptedGateway(AIGateway):
    """Gateway whose provider calls are supplied by the test."""

    def __init__(self, settings: Settings, behaviour) -> None:
        super().__init__(settings)
        self.behaviour = behaviour

    async def _complete(self, system_prompt, user_query):
        return await self.behaviour()

    async def _transcribe(self, audio, filename):
        return await self.behaviour()

    async def _synthesize(self, text, voice):
        return await self.behaviour()


class TestGatewayResult:
    def test_success(self) -> None:
        result = GatewayResult.success("hi")
        assert result.ok
        assert result.value == "hi"
        assert result.error is None

    def test_failure(self) -> None:
        result = GatewayResult.failure("boom")
        assert not result.ok
        assert result.value is None
        assert result.value_or("fallback") == "fallback"


class TestVoiceProfile:
    def test_from_config(self) -> None:
        profile = VoiceProfile.from_config(GatewayConfig())
        assert profile == VoiceProfile(
            voice_id="rzsnuMd2pwYz1rGtMIVI",
            model_id="eleven_monolingual_v1",
            stability=0.5,
            similarity_boost=0.5,
        )


class TestGuard:
    """Errors and timeouts become failed results."""

    @pytest.mark.asyncio
    async def test_success_passes_value_through(self) -> None:
        async def ok():
            return "reply"

        gateway = ScriptedGateway(_settings(), ok)
        assert await gateway.complete("system", "hello") == GatewayResult.success("reply")

    @pytest.mark.asyncio
    async def test_exception_becomes_failure(self) -> None:
        async def broken():
            raise RuntimeError("provider exploded")

        gateway = ScriptedGateway(_settings(), broken)
        result = await gateway.transcribe(b"audio")
        assert not result.ok
        assert "provider exploded" in result.error

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure(self) -> None:
        async def slow():
            await asyncio.sleep(5)
            return b"never"

        gateway = ScriptedGateway(_settings(timeout=0.05), slow)
        result = await gateway.synthesize("hello")
        assert not result.ok
        assert "timed out" in result.error


class TestOfflineGateway:
    @pytest.mark.asyncio
    async def test_every_call_fails(self) -> None:
        gateway = OfflineAIGateway(_settings())
        assert not gateway.can_synthesize
        assert not (await gateway.complete("s", "q")).ok
        assert not (await gateway.transcribe(b"x")).ok
        assert not (await gateway.synthesize("hi")).ok


class TestHostedGateway:
    """Hosted gateway with the provider clients replaced."""

    def _with_openai(self, gateway: HostedAIGateway) -> MagicMock:
        client = MagicMock()
        client.chat.completions.create = AsyncMock()
        client.audio.transcriptions.create = AsyncMock()
        client.close = AsyncMock()
        gateway._openai = client
        return client

    @pytest.mark.asyncio
    async def test_complete_sends_prompt_and_query(self) -> None:
        gateway = HostedAIGateway(_settings(openai_api_key="sk-test"))
        client = self._with_openai(gateway)
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="  Sure thing. "))]
        )

        result = await gateway.complete("You are Aimee.", "syrah price")

        assert result == GatewayResult.success("Sure thing.")
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["temperature"] == 0.6
        assert kwargs["messages"] == [
            {"role": "system", "content": "You are Aimee."},
            {"role": "user", "content": "syrah price"},
        ]

    @pytest.mark.asyncio
    async def test_empty_completion_is_failure(self) -> None:
        gateway = HostedAIGateway(_settings(openai_api_key="sk-test"))
        client = self._with_openai(gateway)
        client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        assert not (await gateway.complete("s", "q")).ok

    @pytest.mark.asyncio
    async def test_missing_openai_key_is_failure(self) -> None:
        gateway = HostedAIGateway(_settings())
        result = await gateway.complete("s", "q")
        assert not result.ok
        assert "OpenAI" in result.error

    @pytest.mark.asyncio
    async def test_transcribe(self) -> None:
        gateway = HostedAIGateway(_settings(openai_api_key="sk-test"))
        client = self._with_openai(gateway)
        client.audio.transcriptions.create.return_value = SimpleNamespace(
            text=" How many bottles of Syrah? "
        )

        result = await gateway.transcribe(b"webm-bytes", "clip.webm")

        assert result.value == "How many bottles of Syrah?"
        kwargs = client.audio.transcriptions.create.call_args.kwargs
        assert kwargs["model"] == "whisper-1"
        assert kwargs["file"] == ("clip.webm", b"webm-bytes")

    @pytest.mark.asyncio
    async def test_synthesize_posts_voice_settings(self) -> None:
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["path"] = request.url.path
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, content=b"ID3-mpeg")

        gateway = HostedAIGateway(_settings(elevenlabs_api_key="xi-test"))
        gateway._http = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="https://api.elevenlabs.io/v1",
        )

        result = await gateway.synthesize("Hello", VoiceProfile(voice_id="voice-1"))
        await gateway.aclose()

        assert result == GatewayResult.success(b"ID3-mpeg")
        assert captured["path"] == "/v1/text-to-speech/voice-1"
        assert captured["headers"]["xi-api-key"] == "xi-test"
        assert captured["headers"]["accept"] == "audio/mpeg"
        assert captured["body"] == {
            "text": "Hello",
            "model_id": "eleven_monolingual_v1",
            "voice_settings": {"stability": 0.5, "similarity_boost": 0.5},
        }

    @pytest.mark.asyncio
    async def test_synthesize_http_error_is_failure(self) -> None:
        gateway = HostedAIGateway(_settings(elevenlabs_api_key="xi-test"))
        gateway._http = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(401)),
            base_url="https://api.elevenlabs.io/v1",
        )

        result = await gateway.synthesize("Hello")
        await gateway.aclose()

        assert not result.ok
        assert "401" in result.error

    def test_can_synthesize_requires_key(self) -> None:
        assert not HostedAIGateway(_settings()).can_synthesize
        assert HostedAIGateway(_settings(elevenlabs_api_key="xi")).can_synthesize

    @pytest.mark.asyncio
    async def test_aclose_releases_clients(self) -> None:
        gateway = HostedAIGateway(_settings(openai_api_key="sk-test"))
        client = self._with_openai(gateway)

        await gateway.aclose()

        client.close.assert_awaited_once()
        assert gateway._openai is None
