"""Tests that lock match semantics and prevent drift.

These tests encode the rules from domain.match_semantics as executable assertions.
"""

import pytest

from adservice.domain.catalog import MAX_ADS_TO_SERVE, build_catalog
from adservice.domain.errors import InvalidRequestError
from adservice.domain.match_semantics import (
    RULE_ABSENT_REQUEST_REJECTED,
    RULE_DUPLICATE_KEYS_REPEAT,
    RULE_FALLBACK_SAMPLE_CAPPED,
    RULE_KEYS_CONCAT_IN_ORDER,
    RULE_MATCHED_UNCAPPED,
)
from adservice.models import AdRequest
from adservice.services.ad_service import AdService


@pytest.fixture
def service():
    return AdService(catalog=build_catalog())


class TestKeyOrderSemantics:
    """Keys: concatenate in request-key order."""

    def test_reversed_keys_reverse_blocks(self, service):
        catalog = service.catalog
        forward = service.get_ads(AdRequest(context_keys=["hair", "decor"])).ads
        backward = service.get_ads(AdRequest(context_keys=["decor", "hair"])).ads
        assert forward == list(catalog.get("hair")) + list(catalog.get("decor"))
        assert backward == list(reversed(forward))
        assert "order" in RULE_KEYS_CONCAT_IN_ORDER


class TestDuplicateSemantics:
    """Duplicates: repeated keys repeat their ads."""

    def test_no_dedup(self, service):
        ads = service.get_ads(AdRequest(context_keys=["kitchen", "kitchen"])).ads
        assert len(ads) == 4
        assert "no de-duplication" in RULE_DUPLICATE_KEYS_REPEAT


class TestCapSemantics:
    """Matched path uncapped; fallback capped."""

    def test_matched_uncapped(self, service):
        ads = service.get_ads(AdRequest(context_keys=list(service.catalog.categories))).ads
        assert len(ads) > MAX_ADS_TO_SERVE
        assert "no MAX_ADS_TO_SERVE cap" in RULE_MATCHED_UNCAPPED

    def test_fallback_capped(self, service):
        ads = service.get_ads(AdRequest()).ads
        assert len(ads) <= MAX_ADS_TO_SERVE
        assert "without replacement" in RULE_FALLBACK_SAMPLE_CAPPED


class TestAbsentRequestSemantics:
    """Absent request rejected; empty request is valid."""

    def test_absent_vs_empty(self, service):
        with pytest.raises(InvalidRequestError):
            service.get_ads(None)
        assert service.get_ads(AdRequest(context_keys=[])).ads
        assert "InvalidRequestError" in RULE_ABSENT_REQUEST_REJECTED
