"""Ad service application package."""

from .models import Ad, AdRequest, AdResponse

__version__ = "0.1.0"
__all__ = [
    "Ad",
    "AdRequest",
    "AdResponse",
]
