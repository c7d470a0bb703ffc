"""Pydantic schemas for wine endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WinePayload(BaseModel):
    """Create/update body.

    Fields are loosely typed on purpose: the inventory store does the
    required-field validation and reports every missing field at once.
    """

    model_config = ConfigDict(extra="ignore")

    wine_name: str | None = Field(None, max_length=255)
    price: str | None = Field(None, max_length=32)
    inventory: Any = None
    customer_last_ordered: str | None = Field(None, max_length=255)
    last_order_date: str | None = Field(None, max_length=64)
    wine_type: str | None = Field(None, max_length=64)


class WineResponse(BaseModel):
    """Wine as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    wine_name: str
    price: str
    inventory: int
    customer_last_ordered: str
    last_order_date: str
    wine_type: str


class DeleteResponse(BaseModel):
    success: bool = True
