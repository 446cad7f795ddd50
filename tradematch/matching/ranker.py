"""Merge local and search-derived providers into a ranked shortlist."""

import logging
from typing import Iterable, List

from tradematch.models import Category, ServiceProvider, normalize_rating

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5


def filter_directory(directory: Iterable[ServiceProvider], category: Category) -> List[ServiceProvider]:
    """Providers whose specialty matches; ``general`` keeps the whole directory."""
    if category == Category.GENERAL:
        return list(directory)
    return [provider for provider in directory if provider.specialty == category]


def rank_providers(
    directory: Iterable[ServiceProvider],
    search_results: Iterable[ServiceProvider],
    category: Category,
    limit: int = MAX_RECOMMENDATIONS,
) -> List[ServiceProvider]:
    local_matches = filter_directory(directory, category)
    merged = local_matches + list(search_results)
    # sorted() is stable, so equal ratings keep local-before-search order.
    ranked = sorted(merged, key=lambda provider: normalize_rating(provider.rating), reverse=True)
    logger.debug(
        "Ranked %d local + %d search providers for category=%s",
        len(local_matches),
        len(merged) - len(local_matches),
        category.value,
    )
    return ranked[: max(limit, 0)]
