"""Request DTOs for the GetAds operation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AdRequest(BaseModel):
    """Input DTO for GetAds."""

    context_keys: list[str] = Field(
        default_factory=list,
        description="Category keys describing the page the ads are shown on",
    )

    @field_validator("context_keys", mode="before")
    @classmethod
    def _null_keys_are_empty(cls, v):
        # a present request with null keys is an empty request, not an absent one
        return [] if v is None else v
