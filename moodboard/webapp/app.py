"""
Moodboard AI - Web API

Flask application for CSV upload and trend analysis.
"""

import logging
from typing import Optional, Tuple

from flask import Flask, Response, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from moodboard.config import MoodboardConfig, create_default_config
from moodboard.core.analysis_store import AnalysisResult
from moodboard.core.csv_loader import (
    CSVAnalysisError,
    UploadValidationError,
    decode_csv_bytes,
    format_size_limit,
    validate_upload,
)
from moodboard.core.trend_analyzer import TrendAnalyzer
from moodboard.generators.report_generator import ReportGenerator
from moodboard.inference.llm_engine import AiInsights, InsightEngine

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def create_app(config: Optional[MoodboardConfig] = None, insight_engine: Optional[InsightEngine] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        config: Moodboard configuration (defaults when omitted)
        insight_engine: Insight engine to use; built lazily from config
    """
    config = config or create_default_config()

    app = Flask(__name__)
    # Leave room for multipart overhead; the file itself is checked in validate_upload
    app.config["MAX_CONTENT_LENGTH"] = config.analysis.max_file_size_bytes + 64 * 1024
    app.config["MOODBOARD_CONFIG"] = config
    app.extensions["moodboard_analyzer"] = TrendAnalyzer(config.analysis)
    app.extensions["moodboard_insights"] = insight_engine
    CORS(app)

    _register_error_handlers(app)
    _register_routes(app)

    return app


def _get_insight_engine() -> InsightEngine:
    engine = current_app.extensions.get("moodboard_insights")
    if engine is None:
        engine = InsightEngine(current_app.config["MOODBOARD_CONFIG"])
        current_app.extensions["moodboard_insights"] = engine
    return engine


def _read_upload() -> str:
    """Validate the uploaded file and return its text."""
    if "file" not in request.files:
        raise UploadValidationError("Please select a CSV file first.")

    file: FileStorage = request.files["file"]
    data = file.read()
    config: MoodboardConfig = current_app.config["MOODBOARD_CONFIG"]
    validate_upload(file.filename, len(data), config.analysis.max_file_size_bytes)

    logger.info(f"Received upload {secure_filename(file.filename)} ({len(data)} bytes)")
    return decode_csv_bytes(data)


def _analyze_upload() -> Tuple[AnalysisResult, Optional[AiInsights]]:
    csv_text = _read_upload()
    result = current_app.extensions["moodboard_analyzer"].analyze_csv(csv_text)

    skip_llm = request.form.get("skip_llm", "").lower() in _TRUE_VALUES
    insights = None if skip_llm else _get_insight_engine().generate_insights(result)
    return result, insights


def _register_routes(app: Flask):

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/analyze", methods=["POST"])
    def analyze():
        """Analyze an uploaded CSV and return the result as JSON."""
        try:
            result, insights = _analyze_upload()
        except (UploadValidationError, CSVAnalysisError) as e:
            return jsonify({"error": str(e)}), 400

        return jsonify({
            "analysis": result.to_dict(),
            "aiInsights": insights.to_dict() if insights else None,
        })

    @app.route("/api/report", methods=["POST"])
    def report():
        """Analyze an uploaded CSV and return a Markdown report."""
        try:
            result, insights = _analyze_upload()
        except (UploadValidationError, CSVAnalysisError) as e:
            return jsonify({"error": str(e)}), 400

        generator = ReportGenerator(current_app.config["MOODBOARD_CONFIG"])
        document = generator.generate_markdown(result, insights)
        return Response(document, mimetype="text/markdown")


def _register_error_handlers(app: Flask):
    # Error handlers to always return JSON for API routes

    @app.errorhandler(400)
    def bad_request(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Bad request", "details": str(e)}), 400
        return e

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found"}), 404
        return e

    @app.errorhandler(413)
    def file_too_large(e):
        limit = format_size_limit(app.config["MOODBOARD_CONFIG"].analysis.max_file_size_bytes)
        return jsonify({"error": f"File size must be less than {limit}."}), 413

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f"Unhandled error on {request.path}: {e}")
        if request.path.startswith("/api/"):
            return jsonify({"error": "Internal server error"}), 500
        return e
