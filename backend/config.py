"""
Runtime settings, read from the environment.

Values may be placed in a .env file in the backend root:

FETCH_TIMEOUT_SECONDS=12
FETCH_USER_AGENT=Mozilla/5.0 (compatible; SEOAnalyzerBot/1.0)
CORS_ALLOW_ORIGINS=*
LOG_LEVEL=INFO

The app loads environment variables automatically using python-dotenv.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "12"))
FETCH_USER_AGENT = os.getenv("FETCH_USER_AGENT", "").strip() or "Mozilla/5.0 (compatible; SEOAnalyzerBot/1.0)"
CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
] or ["*"]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
