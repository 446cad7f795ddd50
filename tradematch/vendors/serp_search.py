"""SerpAPI Google Maps search backend for tradesmen candidates."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from serpapi import GoogleSearch

from tradematch.core.config import is_configured
from tradematch.models import Category, ServiceProvider
from tradematch.vendors.fallbacks import search_fallback
from tradematch.vendors.search import SearchFallback, SearchProvider, WebSearchError

logger = logging.getLogger(__name__)

MAX_RESULTS = 5


def build_serpapi_params(query: str, api_key: str) -> Dict[str, Any]:
    """Construct SerpAPI request parameters for the Google Maps engine."""
    if not query or not query.strip():
        raise ValueError("Query must be provided for SerpAPI lookups.")
    return {"engine": "google_maps", "q": query.strip(), "api_key": api_key, "type": "search"}


def fetch_from_serpapi(query: str, api_key: str) -> Dict[str, Any]:
    """Call SerpAPI Google Maps once and return the raw JSON response."""
    logger.info("Calling SerpAPI for query=%s", query)
    data = GoogleSearch(build_serpapi_params(query, api_key)).get_dict()
    if not data:
        raise WebSearchError("SerpAPI returned an empty payload.")
    if "error" in data:
        raise WebSearchError(f"SerpAPI returned an error response: {data.get('error')}")
    return data


def parse_serpapi_maps(
    data: Optional[Dict[str, Any]], category: Category, location: str
) -> List[ServiceProvider]:
    """Map SerpAPI local results onto ServiceProvider records."""
    if not data:
        return []

    providers: List[ServiceProvider] = []
    for raw in _extract_items(data):
        if not isinstance(raw, dict):
            continue
        name = (raw.get("title") or raw.get("name") or "").strip()
        if not name:
            continue
        providers.append(
            ServiceProvider.from_dict(
                {
                    "name": name,
                    "specialty": category,
                    "rating": raw.get("rating"),
                    "location": raw.get("address") or location,
                    "description": raw.get("description") or raw.get("type") or f"{category.value} contractor",
                    "contact": raw.get("phone"),
                    "website": raw.get("website"),
                }
            )
        )
    return providers[:MAX_RESULTS]


def _extract_items(data: Dict[str, Any]) -> Iterable[Any]:
    """SerpAPI sometimes returns local_results as a list or nested dict."""
    local_results = data.get("local_results")
    if isinstance(local_results, list):
        return local_results
    if isinstance(local_results, dict):
        for key in ("places", "results", "local_results"):
            maybe = local_results.get(key)
            if isinstance(maybe, list):
                return maybe
    place_results = data.get("place_results")
    if isinstance(place_results, list):
        return place_results
    if isinstance(place_results, dict):
        return [place_results]
    logger.warning("SerpAPI response missing local_results. keys=%s", list(data.keys())[:10])
    return []


class SerpMapsSearchProvider(SearchProvider):
    name = "serpapi"

    def __init__(self, api_key: str, fallback: SearchFallback = search_fallback) -> None:
        super().__init__(fallback)
        self.api_key = api_key

    @property
    def configured(self) -> bool:
        return is_configured(self.api_key)

    def _search(self, category: Category, location: str) -> List[ServiceProvider]:
        data = fetch_from_serpapi(f"{category.value} contractor in {location}", self.api_key)
        return parse_serpapi_maps(data, category, location)
