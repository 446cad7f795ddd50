"""Synthetic data used whenever a collaborator is unavailable.

One table per collaborator. Providers receive these callables as
constructor arguments, so tests can swap in fixed payloads.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Dict, List, Optional

from tradematch.matching.extract import extract_trade_type
from tradematch.models import Category, ServiceProvider

AnalysisFallback = Callable[[str, random.Random], Dict[str, Any]]

SKILL_NAMES = tuple(c.value for c in Category if c is not Category.GENERAL)
CERTIFICATIONS = ("licensed", "insured")
RISK_FACTORS = ("weather_dependent", "permits_required")

SEARCH_FALLBACK_ROWS = (
    {
        "name": "Bay Area Pro Services",
        "rating": 4.5,
        "description": "Found through web search - professional service provider",
        "contact": "+1-555-9999",
        "website": "https://bayareapros.com",
    },
    {
        "name": "Local Expert Contractors",
        "rating": 4.3,
        "description": "Found through web search - local expert contractors",
        "contact": "+1-555-8888",
        "website": "https://localexperts.com",
    },
    {
        "name": "AI-Enhanced Services",
        "rating": 4.7,
        "description": "Found through AI search - modern technology-driven contractor",
        "contact": "+1-555-7777",
        "website": "https://aienhanced.com",
    },
)


def zeroentropy_fallback(description: str, rng: random.Random) -> Dict[str, Any]:
    return {
        "tradeType": extract_trade_type(description).value,
        "complexity": "high" if rng.random() > 0.5 else "medium",
        "estimatedCost": rng.randrange(1000, 6000),
        "urgency": "urgent" if rng.random() > 0.7 else "normal",
    }


def arcade_fallback(description: str, rng: random.Random) -> Dict[str, Any]:
    lowered = (description or "").lower()
    return {
        "requiredSkills": [skill for skill in SKILL_NAMES if skill in lowered],
        "experienceLevel": "expert" if rng.random() > 0.5 else "intermediate",
        "certifications": list(CERTIFICATIONS),
    }


def datalog_fallback(description: str, rng: random.Random) -> Dict[str, Any]:
    return {
        "marketDemand": "high",
        "averagePricing": rng.randrange(1500, 4500),
        "completionTime": rng.randrange(3, 17),
        "riskFactors": list(RISK_FACTORS),
    }


def search_fallback(
    category: Category,
    location: str,
    rows: Optional[List[Dict[str, Any]]] = None,
) -> List[ServiceProvider]:
    """The fixed synthetic search result list, stamped with category and location."""
    return [
        ServiceProvider.from_dict({**row, "specialty": category, "location": location})
        for row in (rows if rows is not None else SEARCH_FALLBACK_ROWS)
    ]
