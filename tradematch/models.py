"""Core data models shared by the recommendation pipeline."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class Category(str, Enum):
    """Trade specialty a job description is classified into."""

    PLUMBING = "plumbing"
    CARPENTRY = "carpentry"
    ELECTRICAL = "electrical"
    CONSTRUCTION = "construction"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.GENERAL


def normalize_rating(value: Any) -> float:
    """Coerce a collaborator rating (number or numeric string) to a float.

    Anything unparsable ranks last as 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        rating = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(rating):
        return 0.0
    return rating


@dataclass(frozen=True, slots=True)
class ServiceProvider:
    """A tradesman or company that can be recommended for a job."""

    name: str
    specialty: Category
    rating: float
    location: str
    description: str = ""
    contact: str = ""
    website: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ServiceProvider":
        return cls(
            name=str(raw.get("name") or "").strip(),
            specialty=Category.parse(raw.get("specialty")),
            rating=normalize_rating(raw.get("rating")),
            location=str(raw.get("location") or ""),
            description=str(raw.get("description") or ""),
            contact=str(raw.get("contact") or ""),
            website=str(raw.get("website") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        entry = asdict(self)
        entry["specialty"] = self.specialty.value
        return entry
