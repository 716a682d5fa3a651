"""Tool registry for the MCP server.

Typed arguments via Pydantic; response allowlists (field-level).
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Any

from ...models.requests import AdRequest
from ...services.ad_service import AdService
from ..observability import log_call

# ---------------------------------------------------------------------------
# Response allowlists (field-level)
# ---------------------------------------------------------------------------
ALLOWED_AD_KEYS = frozenset({"redirect_url", "text"})
ALLOWED_RESPONSE_KEYS = frozenset({"ads"})

ALLOWED_TOOLS = frozenset({"ads_get", "ads_categories"})


def _shape_response(response: Any) -> dict:
    """Return only allowed fields for the ads_get response."""
    d = response.model_dump() if hasattr(response, "model_dump") else response
    out: dict = {k: d[k] for k in ALLOWED_RESPONSE_KEYS if k in d}
    if "ads" in out:
        out["ads"] = [{k: ad.get(k) for k in ALLOWED_AD_KEYS if k in ad} for ad in out["ads"]]
    return out


def _default_service() -> AdService:
    from ...wiring import build_ad_service
    return build_ad_service()


def register_ad_tools(mcp, service: AdService | None = None):
    """Register the read-only ad tools."""
    holder: dict[str, AdService] = {}
    if service is not None:
        holder["service"] = service

    def _service() -> AdService:
        if "service" not in holder:
            holder["service"] = _default_service()
        return holder["service"]

    @mcp.tool()
    def ads_get(context_keys: list[str] | None = None) -> str:
        """Get ads for the given context categories; random ads when none match.

        Args:
            context_keys: Category keys (e.g. 'clothing', 'kitchen'). Omit for random ads.

        Returns:
            JSON with ads (redirect_url, text)
        """
        t0 = time.monotonic()
        trace_id = str(uuid.uuid4())
        request = AdRequest(context_keys=context_keys or [])
        response = _service().get_ads(request)
        log_call("ads_get", trace_id, (time.monotonic() - t0) * 1000, extra={"ads_count": len(response.ads)})
        return json.dumps(_shape_response(response), indent=2)

    @mcp.tool()
    def ads_categories() -> str:
        """List known context categories and how many ads each carries."""
        catalog = _service().catalog
        return json.dumps({key: len(catalog.get(key)) for key in catalog.categories})
