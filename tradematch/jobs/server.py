"""HTTP entrypoint for job description uploads and analysis."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from tradematch.core.config import get_settings
from tradematch.pipeline import recommend

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

ALLOWED_MIMETYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
}

# ---------- App ----------
app = Flask(__name__)
_settings = get_settings()
app.config["MAX_CONTENT_LENGTH"] = _settings.max_upload_mb * 1024 * 1024
CORS(app, origins=list(_settings.cors_origins))

# ---------- Routes ----------


@app.get("/api/health")
def healthcheck() -> Any:
    return jsonify({"status": "OK", "message": "Smart Marketplace API is running"}), 200


@app.post("/api/upload")
def upload_jobsheet() -> Any:
    """Accept a ``jobsheet`` file and return recommendations for it."""
    upload = request.files.get("jobsheet")
    if upload is None or not upload.filename:
        return jsonify({"error": "No file uploaded"}), 400

    mimetype = (upload.mimetype or "").lower()
    if mimetype not in ALLOWED_MIMETYPES:
        return jsonify({"error": "Invalid file type. Only PDF, DOC, DOCX, and TXT files are allowed."}), 400

    try:
        if mimetype == "text/plain":
            job_description = upload.read().decode("utf-8", errors="replace")
        else:
            # Binary documents are not parsed; the filename stands in for the text.
            job_description = f"Job description from {upload.filename}"

        logger.info("Processing upload %s (%s)", upload.filename, mimetype)
        result = recommend(job_description)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Upload error: %s", exc)
        return jsonify({"error": "Server error"}), 500

    return jsonify({"success": result["success"], "file": upload.filename, **result}), 200


@app.post("/api/analyze")
def analyze_description() -> Any:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    job_description = payload.get("jobDescription")

    if not isinstance(job_description, str) or not job_description.strip():
        return jsonify({"error": "Job description is required"}), 400

    try:
        result = recommend(job_description)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Analysis error: %s", exc)
        return jsonify({"error": "Server error"}), 500

    return jsonify(result), 200


@app.errorhandler(RequestEntityTooLarge)
def upload_too_large(exc: RequestEntityTooLarge) -> Any:
    return jsonify({"error": f"File exceeds the {_settings.max_upload_mb} MB upload limit"}), 413


# ---------- Internals ----------


def main() -> None:
    port = int(os.getenv("PORT") or _settings.port)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
