"""Static ad catalog.

The catalog maps a category key to its ordered ads and keeps the flattened
list of every ad for random fallback. It is built from literal data and never
changes after construction.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..models.ad import Ad

# Maximum number of ads served on the random fallback path
MAX_ADS_TO_SERVE = 3

_CATALOG_DATA: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("clothing", (
        ("/product/66VCHSJNUP", "Tank top for sale. 20% off."),
    )),
    ("accessories", (
        ("/product/1YMWWN1N4O", "Watch for sale. Buy one, get second kit for free"),
    )),
    ("footwear", (
        ("/product/L9ECAV7KIM", "Loafers for sale. Buy one, get second one for free"),
    )),
    ("hair", (
        ("/product/2ZYFJ3GM2N", "Hairdryer for sale. 50% off."),
    )),
    ("decor", (
        ("/product/0PUK6V6EV0", "Candle holder for sale. 30% off."),
    )),
    ("kitchen", (
        ("/product/9SIQT8TOJO", "Bamboo glass jar for sale. 10% off."),
        ("/product/6E92ZMYYFZ", "Mug for sale. Buy two, get third one for free"),
    )),
)


@dataclass(frozen=True)
class Catalog:
    """Immutable category -> ads mapping plus the flattened ad list."""

    # mappingproxy is unhashable; all_ads carries the same ads in the same order
    by_category: Mapping[str, tuple[Ad, ...]] = field(hash=False)
    all_ads: tuple[Ad, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        for key, ads in self.by_category.items():
            if not ads:
                raise ValueError(f"category {key!r} has no ads")
        if not isinstance(self.by_category, MappingProxyType):
            object.__setattr__(self, "by_category", MappingProxyType(dict(self.by_category)))
        flat = tuple(ad for ads in self.by_category.values() for ad in ads)
        object.__setattr__(self, "all_ads", flat)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self.by_category)

    def get(self, key: str) -> tuple[Ad, ...]:
        """Return the ads for ``key``, or an empty tuple for unknown keys."""
        return self.by_category.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self.by_category

    def __iter__(self) -> Iterator[str]:
        return iter(self.by_category)

    def __len__(self) -> int:
        return len(self.by_category)


def build_catalog() -> Catalog:
    """Build a fresh catalog from the embedded ad data."""
    by_category = {
        category: tuple(Ad(redirect_url=url, text=text) for url, text in ads)
        for category, ads in _CATALOG_DATA
    }
    return Catalog(by_category=by_category)


_catalog: Catalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Return the shared catalog, building it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = build_catalog()
    return _catalog
