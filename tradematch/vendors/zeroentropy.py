"""Zeroentropy complexity and cost analysis."""

from tradematch.vendors.analysis import EndpointAnalyzer

ENDPOINTS = (
    "https://api.zeroentropy.dev/v1/status/get-status",
    "https://api.zeroentropy.dev/v1/analyze",
    "https://api.zeroentropy.dev/analyze",
    "https://api.zeroentropy.dev/v1/jobs/analyze",
    "https://zeroentropy.dev/api/v1/analyze",
    "https://zeroentropy.dev/api/analyze",
)


class ZeroentropyAnalyzer(EndpointAnalyzer):
    name = "zeroentropy"
    endpoints = ENDPOINTS
    analysis_type = "complexity_and_cost"
