"""
HTTP wrapper around the password analyzer.

Endpoints:
- POST /api/analyze: analyze the 'password' field of a JSON body.
- GET /health: service status.
- GET, POST /: minimal HTML page with a password form and the result.
"""

import logging
from datetime import datetime
from typing import Optional

from flask import Flask, jsonify, render_template_string, request

from .analyzer import PasswordAnalyzer
from .common_passwords import load_common_passwords
from .config import AppConfig
from .tiers import tier_for_score

logger = logging.getLogger(__name__)


HTML_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Password Strength Analyzer</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; }
        .meter { height: 10px; background: #e5e7eb; border-radius: 5px; overflow: hidden; }
        .meter-fill { height: 100%; }
        .warning { color: #b45309; }
        .success { color: #15803d; }
    </style>
</head>
<body>
    <h1>Password Strength Analyzer</h1>
    <form method="POST">
        <input type="password" name="password" placeholder="Enter a password" autocomplete="off">
        <button type="submit">Analyze</button>
    </form>
    {% if result %}
    <div class="result {{ tier.css_class if tier else '' }}">
        <h2>{{ result.strength_label }}</h2>
        <p>Score: {{ result.score }}/100 | Entropy: {{ '%.1f' % result.entropy }} bits</p>
        <div class="meter">
            <div class="meter-fill" style="width: {{ result.score }}%; background: {{ tier.color if tier else '#e5e7eb' }};"></div>
        </div>
        {% if result.feedback %}
        <h3>Feedback</h3>
        <ul>
            {% for item in result.feedback %}
            <li class="{{ item.type.value }}">{{ item.message }}</li>
            {% endfor %}
        </ul>
        {% endif %}
        {% if result.suggestions %}
        <h3>Suggestions</h3>
        <ul>
            {% for suggestion in result.suggestions %}
            <li>{{ suggestion }}</li>
            {% endfor %}
        </ul>
        {% endif %}
    </div>
    {% endif %}
</body>
</html>
'''


def _create_error_response(message: str, status_code: int, error_code: str = "api_error") -> tuple:
    """
    Build the JSON error envelope shared by every failing endpoint.
    """
    error_payload = {
        "status": "error",
        "code": error_code,
        "message": message,
        "timestamp": datetime.now().isoformat(),
    }
    logger.warning(f"Returning API error response: Status={status_code}, Code='{error_code}'")
    return jsonify(error_payload), status_code


def _create_success_response(data: dict, status_code: int = 200) -> tuple:
    success_payload = {
        "status": "success",
        "data": data,
        "timestamp": datetime.now().isoformat(),
    }
    return jsonify(success_payload), status_code


def _build_default_analyzer() -> PasswordAnalyzer:
    if AppConfig.COMMON_PASSWORDS_FILE:
        return PasswordAnalyzer(load_common_passwords(AppConfig.COMMON_PASSWORDS_FILE))
    return PasswordAnalyzer()


def create_app(analyzer: Optional[PasswordAnalyzer] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        analyzer: Analyzer to serve. Defaults to one built from the built-in
            common password list, extended by AppConfig.COMMON_PASSWORDS_FILE.
    """
    app = Flask(__name__)
    app.config["DEBUG"] = AppConfig.DEBUG_MODE
    service = analyzer if analyzer is not None else _build_default_analyzer()

    @app.route("/api/analyze", methods=["POST"])
    def analyze_endpoint() -> tuple:
        # Accept JSON bodies regardless of the declared Content-Type.
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return _create_error_response(AppConfig.MSG_INVALID_JSON, 400, "invalid_json")

        password = data.get("password")
        if not password or not isinstance(password, str):
            return _create_error_response(AppConfig.MSG_PASSWORD_REQUIRED, 400, "password_required")

        try:
            result = service.analyze(password)
        except Exception as e:
            # Never echo the cause back to the caller.
            logger.error(f"Password analysis failed: {e}", exc_info=True)
            return _create_error_response(AppConfig.MSG_INTERNAL_SERVER_ERROR, 500, "analysis_failed")

        logger.info(f"Analyzed password via API: score={result.score}, label={result.strength_label}")
        return _create_success_response(result.to_dict())

    @app.route("/health", methods=["GET"])
    def health_check() -> tuple:
        health_payload = {
            "status": "healthy",
            "message": AppConfig.MSG_HEALTH_OK,
            "app_name": AppConfig.APP_NAME,
            "app_version": AppConfig.APP_VERSION,
            "current_server_time": datetime.now().isoformat(),
        }
        return _create_success_response(health_payload)

    @app.route("/", methods=["GET", "POST"])
    def index():
        result = None
        tier = None
        if request.method == "POST":
            password = request.form.get("password", "")
            result = service.analyze(password)
            if password:
                tier = tier_for_score(result.score)
        return render_template_string(HTML_TEMPLATE, result=result, tier=tier)

    @app.errorhandler(404)
    def not_found(error) -> tuple:
        return _create_error_response(AppConfig.MSG_NOT_FOUND, 404, "not_found")

    @app.errorhandler(405)
    def method_not_allowed(error) -> tuple:
        return _create_error_response(
            AppConfig.MSG_METHOD_NOT_ALLOWED.format(method=request.method), 405, "method_not_allowed"
        )

    logger.info(f"{AppConfig.APP_NAME} v{AppConfig.APP_VERSION} application created")
    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None,
               analyzer: Optional[PasswordAnalyzer] = None) -> None:
    app = create_app(analyzer)
    host = host or AppConfig.HOST
    port = port or AppConfig.PORT
    logger.info(f"Starting {AppConfig.APP_NAME} on {host}:{port}")
    app.run(host=host, port=port, debug=AppConfig.DEBUG_MODE)

