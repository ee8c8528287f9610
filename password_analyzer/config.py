"""
Application configuration and logging setup.

Settings are read from environment variables once, when this module is
imported.
"""

import logging
import os
import sys
from typing import IO, Optional

from . import __version__


class AppConfig:
    """
    Configuration for the password analyzer service, client and CLI.
    """
    # --- Application General Settings ---
    APP_NAME = "PasswordAnalyzerAPI"
    APP_VERSION = __version__
    DEBUG_MODE = os.environ.get("FLASK_DEBUG", "False").lower() == "true"
    HOST = os.environ.get("FLASK_RUN_HOST", "127.0.0.1")
    PORT = int(os.environ.get("FLASK_RUN_PORT", 5000))

    # --- Analyzer Settings ---
    # Optional file with extra common passwords, one per line.
    COMMON_PASSWORDS_FILE = os.environ.get("COMMON_PASSWORDS_FILE") or None

    # --- Client Settings ---
    API_URL = os.environ.get("PASSWORD_ANALYZER_API_URL", "http://127.0.0.1:5000/api/analyze")
    REQUEST_TIMEOUT_SECONDS = float(os.environ.get("PASSWORD_ANALYZER_TIMEOUT", 5))
    # Delay before analyzing live input, so only the last keystroke triggers a call.
    DEBOUNCE_SECONDS = float(os.environ.get("PASSWORD_ANALYZER_DEBOUNCE", 0.3))

    # --- Logging Settings ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FILE_PATH = os.environ.get("LOG_FILE_PATH") or None
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # --- API Response Messages ---
    MSG_PASSWORD_REQUIRED = "Password is required"
    MSG_INVALID_JSON = "Invalid JSON payload. The request body must be a JSON object."
    MSG_INTERNAL_SERVER_ERROR = "Failed to analyze password"
    MSG_HEALTH_OK = "Password Analyzer Service is up and running."
    MSG_NOT_FOUND = "The requested resource was not found. Please check the URL."
    MSG_METHOD_NOT_ALLOWED = "The HTTP method '{method}' is not allowed for this endpoint."


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None,
                      stream: Optional[IO[str]] = None) -> None:
    """
    Send log records to a stream (stdout by default) and, if configured, to a
    UTF-8 log file.
    """
    level = (level or AppConfig.LOG_LEVEL).upper()
    log_file = log_file or AppConfig.LOG_FILE_PATH

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=AppConfig.LOG_FORMAT,
        datefmt=AppConfig.LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    logging.getLogger(__name__).debug(f"Logging configured at level {level}")
