"""Web search for tradesmen candidates, with a synthetic fallback list."""

from __future__ import annotations

import logging
from typing import Callable, List

from tradematch.models import Category, ServiceProvider
from tradematch.vendors.fallbacks import search_fallback

logger = logging.getLogger(__name__)

SearchFallback = Callable[[Category, str], List[ServiceProvider]]


class WebSearchError(RuntimeError):
    """Raised when a search backend returns an error payload."""


class SearchProvider:
    """Base search collaborator.

    Subclasses implement ``_search``; any error or empty result here is
    replaced by the fallback list so ``search`` always returns providers.
    """

    name = "search"

    def __init__(self, fallback: SearchFallback = search_fallback) -> None:
        self._fallback = fallback

    @property
    def configured(self) -> bool:
        return False

    def search(self, category: Category, location: str) -> List[ServiceProvider]:
        if not self.configured:
            logger.info("Using synthetic web search (%s credentials not provided)", self.name)
            return self._fallback(category, location)

        try:
            results = self._search(category, location)
        except Exception as exc:  # noqa: BLE001
            logger.error("%s search failed: %s", self.name, exc)
            return self._fallback(category, location)

        if not results:
            logger.info("No %s results for %s in %s, using synthetic data", self.name, category.value, location)
            return self._fallback(category, location)
        return results

    def _search(self, category: Category, location: str) -> List[ServiceProvider]:
        raise NotImplementedError


class SyntheticSearchProvider(SearchProvider):
    """Always answers with the fallback list."""

    name = "synthetic"
