"""Domain types shared across the application."""

from .catalog import MAX_ADS_TO_SERVE, Catalog, build_catalog, get_catalog
from .errors import AdServiceError, InvalidRequestError
from .match_semantics import (
    RULE_ABSENT_REQUEST_REJECTED,
    RULE_DUPLICATE_KEYS_REPEAT,
    RULE_FALLBACK_SAMPLE_CAPPED,
    RULE_KEYS_CONCAT_IN_ORDER,
    RULE_MATCHED_UNCAPPED,
)

__all__ = [
    "MAX_ADS_TO_SERVE",
    "Catalog",
    "build_catalog",
    "get_catalog",
    "AdServiceError",
    "InvalidRequestError",
    "RULE_ABSENT_REQUEST_REJECTED",
    "RULE_DUPLICATE_KEYS_REPEAT",
    "RULE_FALLBACK_SAMPLE_CAPPED",
    "RULE_KEYS_CONCAT_IN_ORDER",
    "RULE_MATCHED_UNCAPPED",
]
