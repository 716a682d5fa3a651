"""Composition root: single place where all wiring happens.

Call ``build_ad_service()`` to get a fully-constructed service. No ad-hoc
construction elsewhere.
"""

from __future__ import annotations

import logging

from .config.runtime import RuntimeSettings, get_settings
from .domain.catalog import get_catalog
from .ports.sampler import RandomAdSampler
from .services.ad_service import AdService


def build_ad_service(settings: RuntimeSettings | None = None) -> AdService:
    """Construct an AdService over the shared catalog."""
    settings = settings or get_settings()
    return AdService(
        catalog=get_catalog(),
        sampler=RandomAdSampler(seed=settings.random_seed),
        max_ads_to_serve=settings.max_ads_to_serve,
        logger=logging.getLogger("adservice.services"),
    )
