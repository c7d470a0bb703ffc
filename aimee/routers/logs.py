"""Interaction log and analytics endpoints."""

from fastapi import APIRouter

from aimee.config import settings
from aimee.models.log_entry import LogEntry
from aimee.schemas.analytics import AnalyticsResponse
from aimee.services.analytics import summarize
from aimee.services.auth import RequireAuth

from ._common import Log, Store

router = APIRouter()


@router.get("/logs", response_model=list[LogEntry])
async def list_logs(_: RequireAuth, log: Log) -> list[LogEntry]:
    """Interaction history, newest first."""
    return log.list()


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(_: RequireAuth, store: Store, log: Log) -> dict:
    """Summary statistics over the inventory and interaction log."""
    return summarize(store, log, recent=settings.recent_activity_size)
