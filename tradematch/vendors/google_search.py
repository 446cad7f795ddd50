"""Client for the Google Custom Search JSON API."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

import requests

from tradematch.core.config import is_configured
from tradematch.models import Category, ServiceProvider
from tradematch.vendors.fallbacks import search_fallback
from tradematch.vendors.http import DEFAULT_TIMEOUT
from tradematch.vendors.search import SearchFallback, SearchProvider, WebSearchError

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://www.googleapis.com/customsearch/v1"

RESULTS_PER_QUERY = 5


def build_query(category: Category, location: str) -> str:
    return f"{category.value} contractor {location} licensed insured"


def custom_search(
    query: str,
    api_key: str,
    cse_id: str,
    num: int = RESULTS_PER_QUERY,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    params = {"key": api_key, "cx": cse_id, "q": query, "num": num}
    response = (session or _SESSION).get(_BASE_URL, params=params, timeout=timeout)
    response.raise_for_status()
    payload = response.json()
    if "error" in payload:
        error = payload["error"]
        message = error.get("message") if isinstance(error, dict) else error
        logger.error("custom_search failed: %s", message)
        raise WebSearchError(str(message))
    return payload


class GoogleSearchProvider(SearchProvider):
    name = "google"

    def __init__(
        self,
        api_key: str,
        cse_id: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
        fallback: SearchFallback = search_fallback,
    ) -> None:
        super().__init__(fallback)
        self.api_key = api_key
        self.cse_id = cse_id
        self.timeout = timeout
        self.session = session
        self.rng = rng or random.Random()

    @property
    def configured(self) -> bool:
        return is_configured(self.api_key) and is_configured(self.cse_id)

    def _search(self, category: Category, location: str) -> List[ServiceProvider]:
        query = build_query(category, location)
        logger.info("Searching Google Custom Search for query=%s", query)
        payload = custom_search(
            query, self.api_key, self.cse_id, timeout=self.timeout, session=self.session
        )
        items = payload.get("items") or []
        return [self._to_provider(item, index, category, location) for index, item in enumerate(items)]

    def _to_provider(self, item: Dict[str, Any], index: int, category: Category, location: str) -> ServiceProvider:
        # Custom Search has no ratings or phone numbers; both are synthetic.
        return ServiceProvider.from_dict(
            {
                "name": item.get("title") or f"Contractor {index + 1}",
                "specialty": category,
                "rating": f"{4.0 + self.rng.random():.1f}",
                "location": location,
                "description": item.get("snippet") or f"Found through Google search - {category.value} contractor",
                "contact": f"+1-555-{self.rng.randrange(1000, 10000)}",
                "website": item.get("link") or f"https://contractor{index + 1}.com",
            }
        )
