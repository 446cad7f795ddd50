"""Base classes for the job-description analysis vendors."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional, Sequence

import requests

from tradematch.core.config import is_configured
from tradematch.vendors.fallbacks import AnalysisFallback
from tradematch.vendors.http import DEFAULT_TIMEOUT, bearer_headers, post_first_success

logger = logging.getLogger(__name__)


def preview(text: str, length: int = 100) -> str:
    return text[:length] + "..." if len(text) > length else text


class AnalysisProvider:
    """An analysis collaborator that never raises for expected failures.

    ``analyze`` returns the vendor payload, or the synthetic fallback when the
    key is missing or the vendor cannot be reached.
    """

    name = "analysis"

    def __init__(
        self,
        api_key: str,
        fallback: AnalysisFallback,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.api_key = api_key
        self._fallback = fallback
        self.timeout = timeout
        self.session = session
        self.rng = rng or random.Random()

    @property
    def configured(self) -> bool:
        return is_configured(self.api_key)

    def fallback(self, description: str) -> Dict[str, Any]:
        return self._fallback(description, self.rng)

    def analyze(self, description: str) -> Any:
        if not self.configured:
            logger.info("Using synthetic %s analysis (no API key provided)", self.name)
            return self.fallback(description)

        logger.info("Analyzing with %s: %s", self.name, preview(description))
        result = self._call(description)
        if result is None:
            logger.warning("%s analysis unavailable, using synthetic data", self.name)
            return self.fallback(description)
        return result

    def _call(self, description: str) -> Optional[Any]:
        raise NotImplementedError


class EndpointAnalyzer(AnalysisProvider):
    """Vendor reachable at one of several candidate URLs, tried in order."""

    endpoints: Sequence[str] = ()
    analysis_type = ""

    def _call(self, description: str) -> Optional[Any]:
        payload = {"job_description": description, "analysis_type": self.analysis_type}
        return post_first_success(
            self.endpoints,
            payload,
            bearer_headers(self.api_key),
            timeout=self.timeout,
            session=self.session,
            vendor=self.name,
        )
