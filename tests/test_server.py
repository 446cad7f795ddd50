import io

import pytest

from tradematch import pipeline
from tradematch.jobs import server
from tradematch.vendors.analysis import AnalysisProvider


class FailingAnalyzer(AnalysisProvider):
    def __init__(self, name):
        super().__init__("key", lambda description, rng: {"synthetic": name})
        self.name = name

    def analyze(self, description):
        raise TimeoutError("vendor timed out")


@pytest.fixture
def client():
    return server.app.test_client()


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_recommend(description):
        calls.append(description)
        return {
            "success": True,
            "jobDescription": description,
            "analysis": {"zeroentropy": {}, "arcade": {}, "datalog": {}},
            "recommendations": [],
        }

    monkeypatch.setattr(server, "recommend", fake_recommend)
    return calls


def test_health_endpoint(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "OK"


def test_analyze_requires_description(client, captured):
    assert client.post("/api/analyze", json={}).status_code == 400
    assert client.post("/api/analyze", json={"jobDescription": "   "}).status_code == 400
    assert client.post("/api/analyze", json={"jobDescription": 42}).status_code == 400
    response = client.post("/api/analyze", data="not json")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Job description is required"}
    assert captured == []


def test_analyze_returns_pipeline_result(client, captured):
    response = client.post("/api/analyze", json={"jobDescription": "Fix wiring in Oakland, CA"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["jobDescription"] == "Fix wiring in Oakland, CA"
    assert "file" not in body
    assert captured == ["Fix wiring in Oakland, CA"]


def test_analyze_internal_error_returns_500(client, monkeypatch):
    def boom(description):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(server, "recommend", boom)

    response = client.post("/api/analyze", json={"jobDescription": "anything"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Server error"}


def test_upload_requires_file(client, captured):
    response = client.post("/api/upload", data={}, content_type="multipart/form-data")
    assert response.status_code == 400
    assert response.get_json() == {"error": "No file uploaded"}


def test_upload_rejects_disallowed_type(client, captured):
    data = {"jobsheet": (io.BytesIO(b"\x89PNG"), "photo.png", "image/png")}
    response = client.post("/api/upload", data=data, content_type="multipart/form-data")
    assert response.status_code == 400
    assert "Invalid file type" in response.get_json()["error"]
    assert captured == []


def test_upload_reads_plain_text(client, captured):
    data = {"jobsheet": (io.BytesIO("Leaking pipe in Reno, NV".encode("utf-8")), "job.txt", "text/plain")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 200
    body = response.get_json()
    assert body["file"] == "job.txt"
    assert body["jobDescription"] == "Leaking pipe in Reno, NV"
    assert captured == ["Leaking pipe in Reno, NV"]


def test_upload_binary_document_uses_filename_placeholder(client, captured):
    data = {"jobsheet": (io.BytesIO(b"%PDF-1.7"), "kitchen.pdf", "application/pdf")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 200
    assert captured == ["Job description from kitchen.pdf"]


def test_upload_too_large(client, captured, monkeypatch):
    monkeypatch.setitem(server.app.config, "MAX_CONTENT_LENGTH", 16)
    data = {"jobsheet": (io.BytesIO(b"x" * 1024), "big.txt", "text/plain")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 413
    assert "upload limit" in response.get_json()["error"]


def test_analysis_survives_all_vendor_failures(client, monkeypatch):
    monkeypatch.setattr(
        pipeline,
        "build_analyzers",
        lambda settings=None: {name: FailingAnalyzer(name) for name in ("zeroentropy", "arcade", "datalog")},
    )

    response = client.post("/api/analyze", json={"jobDescription": "Install cabinets near Fresno, CA"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["analysis"] == {
        "zeroentropy": {"synthetic": "zeroentropy"},
        "arcade": {"synthetic": "arcade"},
        "datalog": {"synthetic": "datalog"},
    }
    names = [r["name"] for r in body["recommendations"]]
    assert names[0] == "Master Carpentry Co."
    assert "Quick Fix Electric" not in names
    assert len(names) <= 5
