"""Shared HTTP plumbing for the analysis vendors."""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()

DEFAULT_TIMEOUT = 15.0


def bearer_headers(api_key: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}


def post_first_success(
    endpoints: Sequence[str],
    payload: Mapping[str, Any],
    headers: Mapping[str, str],
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
    vendor: str = "vendor",
) -> Optional[Any]:
    """POST ``payload`` to each endpoint in order and return the first JSON body.

    Network errors, non-2xx responses and undecodable bodies move on to the
    next candidate. Returns None once every candidate has failed.
    """
    http = session or _SESSION
    for endpoint in endpoints:
        try:
            response = http.post(endpoint, json=dict(payload), headers=dict(headers), timeout=timeout)
        except requests.RequestException as exc:
            logger.info("%s endpoint %s failed: %s", vendor, endpoint, exc)
            continue

        if not (200 <= response.status_code < 300):
            logger.info("%s endpoint %s returned status %s", vendor, endpoint, response.status_code)
            continue

        try:
            data = response.json()
        except ValueError:
            logger.info("%s endpoint %s returned a non-JSON body", vendor, endpoint)
            continue

        logger.info("%s response received from %s", vendor, endpoint)
        return data

    logger.warning("All %d %s endpoints failed", len(endpoints), vendor)
    return None
