import requests

from tradematch.vendors import http


class DummyResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload or {}
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class DummySession:
    def __init__(self, responses):
        self.responses = dict(responses)
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append((url, json, headers, timeout))
        outcome = self.responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_post_first_success_stops_at_first_success():
    session = DummySession(
        {
            "https://a.test": requests.ConnectionError("down"),
            "https://b.test": DummyResponse(status_code=404),
            "https://c.test": DummyResponse(invalid_json=True),
            "https://d.test": DummyResponse(payload={"complexity": "high"}),
            "https://e.test": DummyResponse(payload={"unused": True}),
        }
    )

    result = http.post_first_success(
        ["https://a.test", "https://b.test", "https://c.test", "https://d.test", "https://e.test"],
        {"job_description": "x"},
        http.bearer_headers("key"),
        timeout=3,
        session=session,
    )

    assert result == {"complexity": "high"}
    assert [call[0] for call in session.calls] == [
        "https://a.test",
        "https://b.test",
        "https://c.test",
        "https://d.test",
    ]
    url, body, headers, timeout = session.calls[0]
    assert body == {"job_description": "x"}
    assert headers["Authorization"] == "Bearer key"
    assert timeout == 3


def test_post_first_success_returns_none_when_all_fail(caplog):
    session = DummySession(
        {
            "https://a.test": requests.Timeout("slow"),
            "https://b.test": DummyResponse(status_code=500),
        }
    )

    with caplog.at_level("WARNING"):
        result = http.post_first_success(["https://a.test", "https://b.test"], {}, {}, session=session, vendor="datalog")

    assert result is None
    assert "All 2 datalog endpoints failed" in caplog.text


def test_post_first_success_uses_module_session(monkeypatch):
    session = DummySession({"https://a.test": DummyResponse(payload={"ok": 1})})
    monkeypatch.setattr(http, "_SESSION", session)

    assert http.post_first_success(["https://a.test"], {}, {}) == {"ok": 1}
    assert session.calls[0][3] == http.DEFAULT_TIMEOUT
