"""Domain and request/response models."""

from .ad import Ad
from .requests import AdRequest
from .responses import AdResponse

__all__ = [
    # Domain
    "Ad",
    # Requests
    "AdRequest",
    # Responses
    "AdResponse",
]
