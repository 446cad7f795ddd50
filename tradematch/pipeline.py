"""Recommendation pipeline: analysis fan-out, web search, then ranking."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Mapping, Optional

from tradematch.core.config import Settings, get_settings
from tradematch.core.directory import LOCAL_DIRECTORY
from tradematch.matching.extract import extract_location, extract_trade_type
from tradematch.matching.ranker import rank_providers
from tradematch.models import ServiceProvider
from tradematch.vendors import fallbacks
from tradematch.vendors.analysis import AnalysisProvider
from tradematch.vendors.arcade import ArcadeAnalyzer
from tradematch.vendors.datalog import DatalogAnalyzer
from tradematch.vendors.google_search import GoogleSearchProvider
from tradematch.vendors.search import SearchProvider, SyntheticSearchProvider
from tradematch.vendors.serp_search import SerpMapsSearchProvider
from tradematch.vendors.zeroentropy import ZeroentropyAnalyzer

logger = logging.getLogger(__name__)


def build_analyzers(settings: Optional[Settings] = None) -> Dict[str, AnalysisProvider]:
    settings = settings or get_settings()
    timeout = settings.request_timeout
    return {
        "zeroentropy": ZeroentropyAnalyzer(
            settings.zeroentropy_api_key, fallbacks.zeroentropy_fallback, timeout=timeout
        ),
        "arcade": ArcadeAnalyzer(
            settings.arcade_api_key, fallbacks.arcade_fallback, timeout=timeout, user_id=settings.arcade_user_id
        ),
        "datalog": DatalogAnalyzer(settings.datalog_api_key, fallbacks.datalog_fallback, timeout=timeout),
    }


def build_search_provider(settings: Optional[Settings] = None) -> SearchProvider:
    settings = settings or get_settings()
    if settings.search_backend == "serpapi":
        provider: SearchProvider = SerpMapsSearchProvider(settings.serpapi_api_key)
    else:
        provider = GoogleSearchProvider(
            settings.google_api_key, settings.google_cse_id, timeout=settings.request_timeout
        )
    if not provider.configured:
        logger.info("No %s credentials configured; web search will be synthetic", provider.name)
        return SyntheticSearchProvider()
    return provider


def _analyze_safe(analyzer: AnalysisProvider, description: str) -> Any:
    try:
        result = analyzer.analyze(description)
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s analysis failed: %s", analyzer.name, exc)
        result = None
    if result is None:
        return analyzer.fallback(description)
    return result


def run_analysis(description: str, analyzers: Mapping[str, AnalysisProvider]) -> Dict[str, Any]:
    """Run every analyzer concurrently and wait for all of them.

    Each result is defaulted independently, so one failing vendor never
    affects the others.
    """
    if not analyzers:
        return {}
    with ThreadPoolExecutor(max_workers=len(analyzers)) as executor:
        futures = {name: executor.submit(_analyze_safe, analyzer, description) for name, analyzer in analyzers.items()}
        return {name: future.result() for name, future in futures.items()}


def recommend(
    description: str,
    *,
    analyzers: Optional[Mapping[str, AnalysisProvider]] = None,
    search_provider: Optional[SearchProvider] = None,
    directory: Iterable[ServiceProvider] = LOCAL_DIRECTORY,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """Full pipeline for one job description, returning the JSON-ready response."""
    settings = settings or get_settings()
    if analyzers is None:
        analyzers = build_analyzers(settings)
    if search_provider is None:
        search_provider = build_search_provider(settings)

    analysis = run_analysis(description, analyzers)

    category = extract_trade_type(description)
    location = extract_location(description) or settings.default_location
    logger.info("Searching tradesmen: category=%s location=%s", category.value, location)
    search_results = search_provider.search(category, location)

    ranked: List[ServiceProvider] = rank_providers(directory, search_results, category)
    logger.info("Returning %d recommendations for category=%s", len(ranked), category.value)

    return {
        "success": True,
        "jobDescription": description,
        "analysis": analysis,
        "recommendations": [provider.to_dict() for provider in ranked],
    }
