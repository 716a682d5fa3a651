"""Response DTOs for the GetAds operation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .ad import Ad


class AdResponse(BaseModel):
    """Output DTO for GetAds."""

    ads: list[Ad] = Field(
        default_factory=list,
        description="Matched ads, or a random sample when nothing matched",
    )
