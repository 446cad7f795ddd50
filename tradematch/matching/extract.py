"""Heuristics for pulling a trade category and a location out of free text."""

import re
from typing import Optional, Sequence, Tuple

from tradematch.models import Category

# Ordered: the first group with a hit decides the category.
TRADE_KEYWORDS: Sequence[Tuple[Category, Tuple[str, ...]]] = (
    (Category.PLUMBING, ("plumb", "pipe", "water")),
    (Category.CARPENTRY, ("carpent", "wood", "cabinet")),
    (Category.ELECTRICAL, ("electr", "wiring", "outlet")),
    (Category.CONSTRUCTION, ("construct", "build", "renovation")),
)

# "City, ST" or "Multi Word City, ST"; the state code must be uppercase.
_PLACE = r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z]{2})\b"

LOCATION_PATTERNS = (
    re.compile(r"\b(?i:in|at|near|around)\s+" + _PLACE),
    re.compile(r"\b(?i:location|area|city):\s*" + _PLACE),
    re.compile(_PLACE),
)


def extract_trade_type(description: Optional[str]) -> Category:
    lowered = (description or "").lower()
    for category, keywords in TRADE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.GENERAL


def extract_location(description: Optional[str]) -> Optional[str]:
    """Return the first "City, ST" token found, or None.

    Patterns are tried in priority order: after a locative preposition,
    after a ``location:``/``area:``/``city:`` label, then anywhere.
    """
    text = description or ""
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None
