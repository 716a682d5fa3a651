"""AdService: GetAds orchestration.

Public methods: ``get_ads(request) -> AdResponse`` and
``get_ads_stream(requests) -> Iterator[AdResponse]``.
All matching logic lives here; transports are thin wrappers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ..domain.catalog import MAX_ADS_TO_SERVE, Catalog, get_catalog
from ..domain.errors import InvalidRequestError
from ..models.ad import Ad
from ..models.requests import AdRequest
from ..models.responses import AdResponse
from ..ports.sampler import AdSampler, RandomAdSampler


def get_ads_by_category(catalog: Catalog, category: str) -> tuple[Ad, ...]:
    """Return the ads for a single category (empty for unknown keys)."""
    return catalog.get(category)


def get_random_ads(
    catalog: Catalog,
    count: int = MAX_ADS_TO_SERVE,
    sampler: AdSampler | None = None,
) -> list[Ad]:
    """Return up to ``count`` distinct ads drawn from the whole catalog."""
    sampler = sampler or RandomAdSampler()
    return sampler.sample(catalog.all_ads, min(count, len(catalog.all_ads)))


class AdService:
    """Serves ads for context keys over an immutable catalog."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        sampler: AdSampler | None = None,
        max_ads_to_serve: int = MAX_ADS_TO_SERVE,
        logger: Any = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else get_catalog()
        self._sampler = sampler or RandomAdSampler()
        self._max_ads = max_ads_to_serve
        self._logger = logger

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def max_ads_to_serve(self) -> int:
        return self._max_ads

    def get_ads(self, request: AdRequest | None) -> AdResponse:
        # 1. Reject an absent request before touching the catalog
        if request is None:
            raise InvalidRequestError("request must not be None")

        context_keys = list(request.context_keys)
        if self._logger:
            self._logger.info("get_ads_start", extra={"context_keys": context_keys})

        # 2. Concatenate matches in key order
        ads: list[Ad] = []
        categories_matched = 0
        for key in context_keys:
            category_ads = get_ads_by_category(self._catalog, key)
            if category_ads:
                categories_matched += 1
            ads.extend(category_ads)

        # 3. Random fallback, capped
        fallback = not ads
        if fallback:
            ads = get_random_ads(self._catalog, self._max_ads, self._sampler)

        if self._logger:
            self._logger.info(
                "get_ads_done",
                extra={
                    "categories_matched": categories_matched,
                    "ads_served": len(ads),
                    "fallback": fallback,
                },
            )
        return AdResponse(ads=ads)

    def get_ads_stream(self, requests: Iterable[AdRequest | None]) -> Iterator[AdResponse]:
        """Answer each inbound request with one response, in arrival order."""
        for request in requests:
            yield self.get_ads(request)
