"""Pydantic schemas for the analytics endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from aimee.models.log_entry import LogEntry


class AnalyticsResponse(BaseModel):
    """Summary statistics over the inventory and the interaction log."""

    model_config = ConfigDict(populate_by_name=True)

    total_queries: int = Field(..., alias="totalQueries")
    total_emails: int = Field(..., alias="totalEmails")
    total_wines: int = Field(..., alias="totalWines")
    total_bottles: int = Field(..., alias="totalBottles")
    total_value: int = Field(..., alias="totalValue")
    recent_activity: list[LogEntry] = Field(..., alias="recentActivity")
