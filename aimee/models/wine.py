"""Wine record model for the in-memory inventory."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WINE_TYPE = "Red Wine"


class WineRecord(BaseModel):
    """A wine in the inventory.

    Records are immutable; updates produce a new record with the same id.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    wine_name: str = Field(..., min_length=1)
    price: str  # "$<number>", e.g. "$18"
    inventory: int = Field(..., ge=0)
    customer_last_ordered: str = Field(..., min_length=1)
    last_order_date: str
    wine_type: str = DEFAULT_WINE_TYPE
