"""Voice endpoints: spoken answers, transcription and speech synthesis."""

import base64
import logging

from fastapi import APIRouter, File, HTTPException, Response, UploadFile, status

from aimee.config import settings
from aimee.schemas.query import (
    SpeakRequest,
    TranscriptionResponse,
    VoiceQueryRequest,
    VoiceQueryResponse,
)
from aimee.services.auth import RequireAuth
from aimee.services.gateway import AIGateway, VoiceProfile
from aimee.services.query_resolver import TextAnswer

from ._common import Gateway, Log, Resolver, Store, to_query_response
from .query import require_query

logger = logging.getLogger(__name__)

router = APIRouter()

REPHRASE_INSTRUCTION = (
    " Rephrase the provided answer so it sounds natural when spoken aloud."
    " Do not add, remove or change any facts, names, numbers or prices."
)


def audio_data_url(audio: bytes) -> str:
    """Encode MPEG audio as a data URL the browser can play directly."""
    return "data:audio/mpeg;base64," + base64.b64encode(audio).decode("ascii")


async def _rephrase(gateway: AIGateway, query: str, answer: str) -> str:
    result = await gateway.complete(
        settings.gateway.system_prompt + REPHRASE_INSTRUCTION,
        f"Question: {query}\nAnswer: {answer}",
    )
    return result.value_or(answer)


@router.post("/voice-query", response_model=VoiceQueryResponse)
async def voice_query(
    body: VoiceQueryRequest,
    current_user: RequireAuth,
    store: Store,
    log: Log,
    resolver: Resolver,
    gateway: Gateway,
) -> VoiceQueryResponse:
    """Answer a spoken question and attach synthesized audio when possible.

    Audio is best effort: if synthesis is not configured, fails, or the
    client is iOS with ``skip_audio_for_ios`` enabled, ``audioUrl`` is null.
    """
    query = require_query(body.query)
    logger.info("Voice query received: %s", query)

    result = resolver.resolve(query, store.snapshot())
    response = to_query_response(result)

    if settings.chat_rephrase and isinstance(result, TextAnswer):
        response.response = await _rephrase(gateway, query, result.text)

    log.record_query(query, response.response, current_user.id)

    audio_url = None
    skip_audio = body.is_ios and settings.skip_audio_for_ios
    if gateway.can_synthesize and not skip_audio:
        speech = await gateway.synthesize(response.response)
        if speech.ok:
            audio_url = audio_data_url(speech.value)

    return VoiceQueryResponse(
        response=response.response,
        type=response.type,
        email_draft=response.email_draft,
        audio_url=audio_url,
    )


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    _: RequireAuth,
    gateway: Gateway,
    audio: UploadFile = File(...),
) -> TranscriptionResponse:
    """Convert an uploaded recording to text."""
    content = await audio.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No audio file uploaded",
        )
    if len(content) > settings.max_upload_size_bytes:
        max_mb = settings.max_upload_size_bytes / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Audio exceeds maximum allowed size of {max_mb:.1f} MB",
        )

    result = await gateway.transcribe(content, audio.filename or "audio.webm")
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Transcription service unavailable",
        )
    return TranscriptionResponse(text=result.value)


@router.post("/speak")
async def speak(
    body: SpeakRequest,
    _: RequireAuth,
    gateway: Gateway,
) -> Response:
    """Synthesize speech for arbitrary text and return the MPEG audio."""
    voice = None
    if body.voice_id:
        voice = VoiceProfile(
            voice_id=body.voice_id,
            model_id=gateway.default_voice.model_id,
            stability=gateway.default_voice.stability,
            similarity_boost=gateway.default_voice.similarity_boost,
        )

    result = await gateway.synthesize(body.text, voice)
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Speech service unavailable",
        )
    return Response(content=result.value, media_type="audio/mpeg")
