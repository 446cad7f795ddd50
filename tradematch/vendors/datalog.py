"""Datalog market intelligence analysis."""

from tradematch.vendors.analysis import EndpointAnalyzer

ENDPOINTS = (
    "https://api.datalog.com/v1/analyze",
    "https://api.datalog.com/analyze",
    "https://api.datalog.com/v1/market/insights",
)


class DatalogAnalyzer(EndpointAnalyzer):
    name = "datalog"
    endpoints = ENDPOINTS
    analysis_type = "market_intelligence"
