"""Service settings read from environment variables."""
from __future__ import annotations

import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()  # Root logger level
APP_TITLE = os.environ.get("APP_TITLE", "Stats Analyzer Service")  # OpenAPI title
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")  # OpenAPI version
HOST = os.environ.get("HOST", "0.0.0.0")  # Bind address for stats_analyzer.serve
PORT = int(os.environ.get("PORT", 8000))  # Bind port for stats_analyzer.serve
