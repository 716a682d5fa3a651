"""Services: ad matching; catalog in domain."""

from ..domain.catalog import Catalog, build_catalog, get_catalog
from .ad_service import AdService, get_ads_by_category, get_random_ads

__all__ = [
    "AdService",
    "Catalog",
    "build_catalog",
    "get_ads_by_category",
    "get_catalog",
    "get_random_ads",
]
