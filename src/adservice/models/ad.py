"""Ad schema model using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field


class Ad(BaseModel):
    """A single advertisement.

    Frozen so instances are hashable and compare by value: two ads with the
    same fields are interchangeable.
    """

    model_config = ConfigDict(frozen=True)

    redirect_url: str = Field(..., description="URL to redirect users to when the ad is clicked")
    text: str = Field(..., description="Short advertisement text")
