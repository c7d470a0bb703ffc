"""Text query, chat and email endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from aimee.config import settings
from aimee.schemas.query import (
    ChatResponse,
    QueryRequest,
    QueryResponse,
    SendEmailRequest,
    SendEmailResponse,
)
from aimee.services.auth import RequireAuth

from ._common import APOLOGY, Gateway, Log, Outbox, Resolver, Store, to_query_response

logger = logging.getLogger(__name__)

router = APIRouter()


def require_query(query: str | None) -> str:
    """Return the stripped query or raise 400 when it is missing."""
    if query is None or not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query missing",
        )
    return query.strip()


@router.post("/query", response_model=QueryResponse)
async def query_inventory(
    body: QueryRequest,
    current_user: RequireAuth,
    store: Store,
    log: Log,
    resolver: Resolver,
) -> QueryResponse:
    """Answer a question about the inventory or draft a customer email."""
    query = require_query(body.query)
    logger.info("Query received: %s", query)

    result = resolver.resolve(query, store.snapshot())
    log.record_query(query, result.text, current_user.id)
    return to_query_response(result)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: QueryRequest,
    current_user: RequireAuth,
    log: Log,
    gateway: Gateway,
) -> ChatResponse:
    """Free-form answer from the chat model, with an apology on failure."""
    query = require_query(body.query)

    result = await gateway.complete(settings.gateway.system_prompt, query)
    response = result.value_or(APOLOGY)
    log.record_query(query, response, current_user.id)
    return ChatResponse(response=response)


@router.post("/send-email", response_model=SendEmailResponse)
async def send_email(
    body: SendEmailRequest,
    current_user: RequireAuth,
    log: Log,
    outbox: Outbox,
) -> SendEmailResponse:
    """Hand a reviewed draft to the outbox and record it.

    The outbox logs the message; nothing is delivered.
    """
    sent = await outbox.send_draft(body.recipient, body.content)
    if not sent:
        return SendEmailResponse(success=False, message=f"Could not send email to {body.recipient}")

    entry = log.record_email(body.recipient, current_user.id)
    return SendEmailResponse(success=True, message=entry.response)
