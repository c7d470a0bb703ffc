"""Pydantic schemas for query, voice and email endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Free-text question about the inventory."""

    query: str | None = Field(None, max_length=2000)


class VoiceQueryRequest(QueryRequest):
    """Question from the voice client, which may be an iOS device."""

    model_config = ConfigDict(populate_by_name=True)

    is_ios: bool = Field(False, alias="isIOS")


class EmailDraftResponse(BaseModel):
    recipient: str
    content: str
    summary: str


class QueryResponse(BaseModel):
    """Resolver answer; ``email_draft`` is set for email requests."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    type: str = "text"
    email_draft: EmailDraftResponse | None = Field(None, alias="emailDraft")


class VoiceQueryResponse(QueryResponse):
    """Answer plus optional spoken version as a data URL."""

    audio_url: str | None = Field(None, alias="audioUrl")


class ChatResponse(BaseModel):
    response: str


class SpeakRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    voice_id: str | None = Field(None, max_length=64)


class TranscriptionResponse(BaseModel):
    text: str


class SendEmailRequest(BaseModel):
    recipient: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1, max_length=10000)


class SendEmailResponse(BaseModel):
    success: bool
    message: str
