"""
Wire schemas for the receipt points API.

Python attributes are snake_case; the JSON payload uses the camelCase aliases.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A single line entry on a receipt."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = Field("", description="Decimal string, e.g. '6.49'")


class Receipt(BaseModel):
    """A submitted purchase receipt."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field("", alias="purchaseTime", description="HH:MM, 24h")
    items: tuple[Item, ...] = ()
    total: str = Field("", description="Decimal string, e.g. '35.35'")


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int = Field(..., ge=0)
