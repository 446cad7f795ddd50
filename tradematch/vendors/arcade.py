"""Arcade tool execution used for skill matching."""

import logging
from typing import Any, Dict, Optional

import requests

from tradematch.vendors.analysis import AnalysisProvider
from tradematch.vendors.http import bearer_headers

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://api.arcade.dev/v1"

DEFAULT_USER_ID = "smart-marketplace-user"


class ArcadeError(RuntimeError):
    """Raised when a tool execution fails or returns no output."""


class ArcadeAnalyzer(AnalysisProvider):
    name = "arcade"

    def __init__(self, *args: Any, user_id: str = DEFAULT_USER_ID, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.user_id = user_id

    def execute_tool(self, tool_name: str, tool_input: Dict[str, Any]) -> Any:
        http = self.session or _SESSION
        body = {"tool_name": tool_name, "input": tool_input, "user_id": self.user_id}
        response = http.post(
            f"{_BASE_URL}/tools/execute",
            json=body,
            headers=bearer_headers(self.api_key),
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ArcadeError(f"{tool_name} returned a non-object payload")
        output = payload.get("output") or {}
        if not isinstance(output, dict):
            raise ArcadeError(f"{tool_name} returned malformed output: {output!r}")
        if output.get("error"):
            raise ArcadeError(str(output["error"]))
        if "value" not in output:
            raise ArcadeError(f"{tool_name} returned no output value")
        return output["value"]

    def _call(self, description: str) -> Optional[Any]:
        attempts = (
            ("Text.Analyze", {"text": description, "analysis_type": "skill_matching"}),
            ("Text.Process", {"content": description, "task": "extract skills and requirements for tradesman job"}),
        )
        for tool_name, tool_input in attempts:
            try:
                value = self.execute_tool(tool_name, tool_input)
            except (requests.RequestException, ArcadeError, ValueError) as exc:
                logger.info("Arcade tool %s failed: %s", tool_name, exc)
                continue
            logger.info("Arcade %s response received", tool_name)
            return value
        return None
