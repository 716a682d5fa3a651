"""Tests for the static ad catalog."""

import threading

import pytest

from adservice.domain import catalog as catalog_module
from adservice.domain.catalog import MAX_ADS_TO_SERVE, Catalog, build_catalog, get_catalog
from adservice.models import Ad

EXPECTED_CATEGORIES = ("clothing", "accessories", "footwear", "hair", "decor", "kitchen")


class TestBuildCatalog:
    """build_catalog() is deterministic and well-formed."""

    def test_known_categories_in_order(self):
        assert build_catalog().categories == EXPECTED_CATEGORIES

    def test_every_category_non_empty(self):
        catalog = build_catalog()
        for key in catalog:
            assert len(catalog.get(key)) >= 1

    def test_kitchen_keeps_insertion_order(self):
        kitchen = build_catalog().get("kitchen")
        assert [ad.redirect_url for ad in kitchen] == ["/product/9SIQT8TOJO", "/product/6E92ZMYYFZ"]

    def test_all_ads_is_flattened_catalog(self):
        catalog = build_catalog()
        flat = [ad for key in catalog for ad in catalog.get(key)]
        assert list(catalog.all_ads) == flat
        assert len(catalog.all_ads) == 7

    def test_repeated_builds_are_equal(self):
        assert build_catalog() == build_catalog()

    def test_unknown_key_yields_nothing(self):
        catalog = build_catalog()
        assert catalog.get("garden") == ()
        assert "garden" not in catalog

    def test_lookup_is_case_sensitive(self):
        assert build_catalog().get("Clothing") == ()


class TestCatalogImmutability:
    """No mutation path after construction."""

    def test_mapping_rejects_assignment(self):
        catalog = build_catalog()
        with pytest.raises(TypeError):
            catalog.by_category["garden"] = (Ad(redirect_url="/x", text="x"),)

    def test_dataclass_is_frozen(self):
        catalog = build_catalog()
        with pytest.raises(AttributeError):
            catalog.all_ads = ()

    def test_ads_are_frozen(self):
        ad = build_catalog().get("hair")[0]
        with pytest.raises(Exception):
            ad.text = "changed"

    def test_all_ads_always_derived(self):
        ad = Ad(redirect_url="/x", text="x")
        with pytest.raises(TypeError):
            Catalog(by_category={"one": (ad,)}, all_ads=())
        assert Catalog(by_category={"one": (ad,)}).all_ads == (ad,)

    def test_catalog_is_hashable(self):
        assert hash(build_catalog()) == hash(build_catalog())

    def test_empty_category_rejected(self):
        with pytest.raises(ValueError):
            Catalog(by_category={"empty": ()})


class TestSharedCatalog:
    """get_catalog() builds the shared instance once."""

    def test_returns_same_instance(self):
        assert get_catalog() is get_catalog()

    def test_concurrent_first_callers_share_instance(self, monkeypatch):
        monkeypatch.setattr(catalog_module, "_catalog", None)
        calls = []
        real_build = catalog_module.build_catalog

        def counting_build():
            calls.append(1)
            return real_build()

        monkeypatch.setattr(catalog_module, "build_catalog", counting_build)
        results = []
        threads = [threading.Thread(target=lambda: results.append(get_catalog())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(calls) == 1
        assert all(r is results[0] for r in results)


def test_max_ads_to_serve():
    assert MAX_ADS_TO_SERVE == 3
