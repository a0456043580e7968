"""
Configuration constants for the LaTeX Lite client
"""
import os
from pathlib import Path


def get_env(key: str, fallback: str) -> str:
    """Return an environment variable, or fallback when unset or empty"""
    value = os.environ.get(key)
    if value:
        return value
    return fallback


# Server Configuration
DEFAULT_BASE_URL = "https://latexlite.com"
DEMO_API_KEY = "<your-api-key>"  # Public placeholder, not a secret

BASE_URL = get_env("BASE_URL", DEFAULT_BASE_URL)
API_KEY = get_env("API_KEY", DEMO_API_KEY)

# API Endpoints
RENDERS_PATH = "/v1/renders"
RENDERS_SYNC_PATH = "/v1/renders-sync"

# Timing Configuration
REQUEST_TIMEOUT = 60  # seconds, per HTTP request
POLL_INTERVAL = 2  # seconds between status checks
WAIT_TIMEOUT = 60  # seconds before giving up on a job

# Download Configuration
DOWNLOAD_CHUNK_SIZE = 8192
ERROR_BODY_PREVIEW_CHARS = 500

# Output
OUTPUT_DIR = Path(".")
PREVIEW_KEY_CHARS = 10


def preview_key(key: str, n: int = PREVIEW_KEY_CHARS) -> str:
    """First n characters of an API key, safe to print"""
    if n <= 0:
        return ""
    return key[:n]
