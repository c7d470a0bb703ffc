"""Shared dependencies for the API routers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from slowapi import Limiter
from slowapi.util import get_remote_address

from aimee.config import settings
from aimee.schemas.query import EmailDraftResponse, QueryResponse
from aimee.services.email import EmailService, get_email_service
from aimee.services.gateway import AIGateway, get_ai_gateway
from aimee.services.interaction_log import InteractionLog, get_interaction_log
from aimee.services.inventory import InventoryStore, get_inventory_store
from aimee.services.query_resolver import EmailDraft, QueryResolver, ResolverResult

# Rate limiter shared with the application (app.state.limiter)
limiter = Limiter(key_func=get_remote_address)

APOLOGY = "Sorry, I could not process that."


@lru_cache(maxsize=1)
def get_query_resolver() -> QueryResolver:
    """FastAPI dependency returning the configured query resolver."""
    return QueryResolver(email_intents=settings.email_intents_enabled)


Store = Annotated[InventoryStore, Depends(get_inventory_store)]
Log = Annotated[InteractionLog, Depends(get_interaction_log)]
Gateway = Annotated[AIGateway, Depends(get_ai_gateway)]
Resolver = Annotated[QueryResolver, Depends(get_query_resolver)]
Outbox = Annotated[EmailService, Depends(get_email_service)]


def to_query_response(result: ResolverResult) -> QueryResponse:
    """Convert a resolver result into the API response shape."""
    if isinstance(result, EmailDraft):
        return QueryResponse(
            response=result.summary,
            type="email_draft",
            email_draft=EmailDraftResponse(
                recipient=result.recipient,
                content=result.content,
                summary=result.summary,
            ),
        )
    return QueryResponse(response=result.text)
